"""
Pydantic schemas for derived financial reports.

Reports are recomputed on every call and never stored.
"""

from decimal import Decimal

from pydantic import BaseModel

from bookkeeping.models.enums import AccountClass, TrialBalanceMode


class TrialBalanceLine(BaseModel):
    account_id: int
    code: str
    name: str
    account_class: AccountClass
    debit: Decimal
    credit: Decimal


class TrialBalance(BaseModel):
    organization_id: int
    mode: TrialBalanceMode
    lines: list[TrialBalanceLine]
    total_debit: Decimal
    total_credit: Decimal


class IncomeStatementLine(BaseModel):
    account_id: int
    code: str
    name: str
    amount: Decimal


class IncomeStatement(BaseModel):
    organization_id: int
    revenues: list[IncomeStatementLine]
    expenses: list[IncomeStatementLine]
    total_revenue: Decimal
    total_expenses: Decimal
    net_income: Decimal


class DashboardSummary(BaseModel):
    organization_id: int
    total_revenue: Decimal
    total_expenses: Decimal
    net_profit: Decimal
    cash_balance: Decimal
