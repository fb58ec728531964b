"""
Tests for the ReportService.

Tests cover:
- Sign-based and normal-balance trial balance columns
- Trial balance column totals
- Income statement partitions and totals
- Dashboard summary
- Unknown organizations and strict lookup
- Reports are pure reads
"""

from decimal import Decimal

import pytest

from bookkeeping.exceptions import NotFoundError
from bookkeeping.models.enums import TrialBalanceMode
from bookkeeping.services.ledger_service import LedgerService
from bookkeeping.services.report_service import ReportService
from tests.helpers import credit, debit, entry, make_account, make_organization


@pytest.fixture
def books(storage):
    """
    A small set of books after one sale and one expense.

    Sale:    debit cash 100, credit sales 100
    Expense: debit admin 40, credit cash 40
    """
    org = make_organization(storage)
    cash = make_account(storage, org.id, "1111", "asset", name="Cash")
    sales = make_account(storage, org.id, "4100", "revenue", name="Sales")
    admin = make_account(storage, org.id, "5100", "expense", name="Admin")
    ledger = LedgerService(storage)
    ledger.commit_entry(org.id, entry(debit(cash, "100.00"), credit(sales, "100.00")))
    ledger.commit_entry(org.id, entry(debit(admin, "40.00"), credit(cash, "40.00")))
    return org, cash, sales, admin


def columns(report):
    return {line.code: (line.debit, line.credit) for line in report.lines}


# --- Trial Balance Tests ---

class TestTrialBalance:

    def test_signed_mode_places_by_sign(self, storage, books):
        org, _, _, _ = books

        report = ReportService(storage).trial_balance(org.id)

        assert report.mode == TrialBalanceMode.SIGNED
        # Sales carries a positive (normal) credit balance, so the
        # sign-based mapping shows it on the debit side.
        assert columns(report) == {
            "1111": (Decimal("60.00"), Decimal("0")),
            "4100": (Decimal("100.00"), Decimal("0")),
            "5100": (Decimal("40.00"), Decimal("0")),
        }

    def test_signed_mode_negative_balance_goes_to_credit(self, storage):
        org = make_organization(storage)
        cash = make_account(storage, org.id, "1111", "asset")
        loan = make_account(storage, org.id, "2100", "liability")
        LedgerService(storage).commit_entry(org.id, entry(
            debit(loan, "25.00"), credit(cash, "25.00"),
        ))

        report = ReportService(storage).trial_balance(org.id)

        assert columns(report) == {
            "1111": (Decimal("0"), Decimal("25.00")),
            "2100": (Decimal("0"), Decimal("25.00")),
        }

    def test_zero_balance_shows_both_zero(self, storage):
        org = make_organization(storage)
        make_account(storage, org.id, "3000", "equity")

        report = ReportService(storage).trial_balance(org.id)

        assert columns(report) == {"3000": (Decimal("0"), Decimal("0"))}
        assert report.total_debit == report.total_credit == Decimal("0")

    def test_normal_balance_mode_columns(self, storage, books):
        org, _, _, _ = books

        report = ReportService(storage).trial_balance(
            org.id, mode=TrialBalanceMode.NORMAL_BALANCE
        )

        assert columns(report) == {
            "1111": (Decimal("60.00"), Decimal("0")),
            "4100": (Decimal("0"), Decimal("100.00")),
            "5100": (Decimal("40.00"), Decimal("0")),
        }

    def test_normal_balance_mode_totals_agree(self, storage):
        org = make_organization(storage)
        cash = make_account(storage, org.id, "1111", "asset")
        bank = make_account(storage, org.id, "1112", "asset")
        payable = make_account(storage, org.id, "2100", "liability")
        capital = make_account(storage, org.id, "3000", "equity")
        sales = make_account(storage, org.id, "4100", "revenue")
        rent = make_account(storage, org.id, "5100", "expense")
        ledger = LedgerService(storage)
        ledger.commit_entry(org.id, entry(debit(bank, "5000"), credit(capital, "5000")))
        ledger.commit_entry(org.id, entry(debit(cash, "750"), credit(sales, "750")))
        ledger.commit_entry(org.id, entry(debit(rent, "900"), credit(payable, "900")))
        ledger.commit_entry(org.id, entry(debit(payable, "900"), credit(bank, "900")))
        # Cash goes negative: an abnormal balance
        ledger.commit_entry(org.id, entry(debit(rent, "1000"), credit(cash, "1000")))

        report = ReportService(storage).trial_balance(
            org.id, mode="normal_balance"
        )

        assert columns(report)["1111"] == (Decimal("0"), Decimal("250"))
        assert report.total_debit == report.total_credit
        assert report.total_debit == Decimal("6000")

    def test_signed_mode_totals_agree_without_credit_normal_balances(
        self, storage
    ):
        org = make_organization(storage)
        cash = make_account(storage, org.id, "1111", "asset")
        bank = make_account(storage, org.id, "1112", "asset")
        LedgerService(storage).commit_entry(org.id, entry(
            debit(bank, "300"), credit(cash, "300"),
        ))

        report = ReportService(storage).trial_balance(org.id)

        assert report.total_debit == report.total_credit == Decimal("300")


# --- Income Statement Tests ---

class TestIncomeStatement:

    def test_totals_and_net_income(self, storage, books):
        org, _, _, _ = books

        statement = ReportService(storage).income_statement(org.id)

        assert statement.total_revenue == Decimal("100.00")
        assert statement.total_expenses == Decimal("40.00")
        assert statement.net_income == Decimal("60.00")
        assert [line.code for line in statement.revenues] == ["4100"]
        assert [line.code for line in statement.expenses] == ["5100"]

    def test_revenue_shown_as_absolute_value(self, storage):
        org = make_organization(storage)
        cash = make_account(storage, org.id, "1111", "asset")
        returns = make_account(storage, org.id, "4200", "revenue")
        LedgerService(storage).commit_entry(org.id, entry(
            debit(returns, "15.00"), credit(cash, "15.00"),
        ))

        statement = ReportService(storage).income_statement(org.id)

        assert statement.revenues[0].amount == Decimal("15.00")
        assert statement.total_revenue == Decimal("15.00")

    def test_expense_shown_with_raw_sign(self, storage):
        org = make_organization(storage)
        cash = make_account(storage, org.id, "1111", "asset")
        refund = make_account(storage, org.id, "5200", "expense")
        LedgerService(storage).commit_entry(org.id, entry(
            debit(cash, "10.00"), credit(refund, "10.00"),
        ))

        statement = ReportService(storage).income_statement(org.id)

        assert statement.expenses[0].amount == Decimal("-10.00")
        assert statement.net_income == Decimal("10.00")

    def test_zero_balance_accounts_included(self, storage):
        org = make_organization(storage)
        make_account(storage, org.id, "4100", "revenue")
        make_account(storage, org.id, "5100", "expense")
        make_account(storage, org.id, "1111", "asset")

        statement = ReportService(storage).income_statement(org.id)

        assert len(statement.revenues) == 1
        assert len(statement.expenses) == 1
        assert statement.net_income == Decimal("0")


# --- Dashboard Tests ---

class TestDashboard:

    def test_summary(self, storage, books):
        org, _, _, _ = books
        make_account(storage, org.id, "1112", "asset", opening_balance="500")
        make_account(storage, org.id, "1200", "asset", opening_balance="900")

        summary = ReportService(storage).dashboard_summary(org.id)

        assert summary.total_revenue == Decimal("100.00")
        assert summary.total_expenses == Decimal("40.00")
        assert summary.net_profit == Decimal("60.00")
        # 1111 and 1112 are cash accounts; 1200 receivables is not
        assert summary.cash_balance == Decimal("560.00")


# --- Organization Lookup Tests ---

class TestUnknownOrganization:

    def test_reports_empty_by_default(self, storage):
        service = ReportService(storage, strict=False)

        trial_balance = service.trial_balance(999)
        statement = service.income_statement(999)

        assert trial_balance.lines == []
        assert trial_balance.total_debit == Decimal("0")
        assert statement.revenues == [] and statement.expenses == []
        assert statement.net_income == Decimal("0")

    def test_strict_lookup_raises(self, storage):
        service = ReportService(storage, strict=True)

        with pytest.raises(NotFoundError):
            service.trial_balance(999)
        with pytest.raises(NotFoundError):
            service.income_statement(999)

    def test_empty_organization_returns_empty_reports(self, storage):
        org = make_organization(storage)
        service = ReportService(storage, strict=True)

        assert service.trial_balance(org.id).lines == []
        assert service.income_statement(org.id).total_revenue == Decimal("0")


def test_reports_are_repeatable(storage, books):
    org, _, _, _ = books
    service = ReportService(storage)

    assert service.trial_balance(org.id) == service.trial_balance(org.id)
    assert service.income_statement(org.id) == service.income_statement(org.id)
    assert service.dashboard_summary(org.id) == service.dashboard_summary(org.id)
