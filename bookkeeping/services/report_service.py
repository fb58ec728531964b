"""
Report service — financial views derived from account balances.

Every report is recomputed from the current account state on
each call. Nothing here writes to storage.
"""

from decimal import Decimal

from bookkeeping.config import get_settings
from bookkeeping.exceptions import NotFoundError
from bookkeeping.models.account import Account
from bookkeeping.models.enums import AccountClass, TrialBalanceMode
from bookkeeping.schemas.reports import (
    DashboardSummary,
    IncomeStatement,
    IncomeStatementLine,
    TrialBalance,
    TrialBalanceLine,
)
from bookkeeping.stores.base import Storage

ZERO = Decimal("0")


def signed_columns(balance: Decimal) -> tuple[Decimal, Decimal]:
    """
    Place a balance by its sign: positive is a debit, negative a credit.

    This ignores the account class, so a credit-normal account with a
    positive balance (revenue, liabilities, equity) shows up on the
    debit side.
    """
    if balance > 0:
        return balance, ZERO
    if balance < 0:
        return ZERO, -balance
    return ZERO, ZERO


def normal_balance_columns(account: Account) -> tuple[Decimal, Decimal]:
    """
    Place a balance on the side its account class normally carries.

    A positive balance goes to the class's normal side; a negative
    (abnormal) balance goes to the opposite side.
    """
    debit, credit = signed_columns(Decimal(account.balance))
    if account.account_class.is_debit_normal:
        return debit, credit
    return credit, debit


class ReportService:

    def __init__(self, storage: Storage, strict: bool | None = None):
        self.storage = storage
        if strict is None:
            strict = get_settings().STRICT_ORGANIZATION_LOOKUP
        self.strict = strict

    def _accounts(self, organization_id: int) -> list[Account]:
        if self.strict and not self.storage.accounts.get_organization(
            organization_id
        ):
            raise NotFoundError("Organization", organization_id)
        return self.storage.accounts.list_accounts(organization_id)

    def trial_balance(
        self,
        organization_id: int,
        mode: TrialBalanceMode = TrialBalanceMode.SIGNED,
    ) -> TrialBalance:
        """
        List every account's balance split into debit and credit columns.

        SIGNED mode places balances by sign alone. NORMAL_BALANCE mode
        places them by the account class's normal side, which is the
        mode whose columns always total the same for a ledger that
        started from zero.
        """
        mode = TrialBalanceMode(mode)
        lines = []
        for account in self._accounts(organization_id):
            if mode == TrialBalanceMode.NORMAL_BALANCE:
                debit, credit = normal_balance_columns(account)
            else:
                debit, credit = signed_columns(Decimal(account.balance))
            lines.append(TrialBalanceLine(
                account_id=account.id,
                code=account.code,
                name=account.name,
                account_class=account.account_class,
                debit=debit,
                credit=credit,
            ))

        return TrialBalance(
            organization_id=organization_id,
            mode=mode,
            lines=lines,
            total_debit=sum((line.debit for line in lines), ZERO),
            total_credit=sum((line.credit for line in lines), ZERO),
        )

    def income_statement(self, organization_id: int) -> IncomeStatement:
        """
        Revenue and expense accounts with their totals and net income.

        Revenue amounts are shown as absolute values; expense amounts
        are the raw balances. Zero-balance accounts are included.
        """
        revenues = []
        expenses = []
        for account in self._accounts(organization_id):
            balance = Decimal(account.balance)
            if account.account_class == AccountClass.REVENUE:
                revenues.append(self._statement_line(account, abs(balance)))
            elif account.account_class == AccountClass.EXPENSE:
                expenses.append(self._statement_line(account, balance))

        total_revenue = sum((line.amount for line in revenues), ZERO)
        total_expenses = sum((line.amount for line in expenses), ZERO)

        return IncomeStatement(
            organization_id=organization_id,
            revenues=revenues,
            expenses=expenses,
            total_revenue=total_revenue,
            total_expenses=total_expenses,
            net_income=total_revenue - total_expenses,
        )

    @staticmethod
    def _statement_line(account: Account, amount: Decimal) -> IncomeStatementLine:
        return IncomeStatementLine(
            account_id=account.id,
            code=account.code,
            name=account.name,
            amount=amount,
        )

    def dashboard_summary(
        self, organization_id: int, cash_prefix: str | None = None
    ) -> DashboardSummary:
        """
        Headline figures for an organization.

        Cash balance sums the active asset accounts whose code starts
        with the configured cash prefix (1111 cash box, 1112 bank, ...).
        """
        if cash_prefix is None:
            cash_prefix = get_settings().CASH_ACCOUNT_PREFIX

        statement = self.income_statement(organization_id)
        cash_balance = sum(
            (
                Decimal(account.balance)
                for account in self._accounts(organization_id)
                if account.account_class == AccountClass.ASSET
                and account.is_active
                and account.code.startswith(cash_prefix)
            ),
            ZERO,
        )

        return DashboardSummary(
            organization_id=organization_id,
            total_revenue=statement.total_revenue,
            total_expenses=statement.total_expenses,
            net_profit=statement.net_income,
            cash_balance=cash_balance,
        )
