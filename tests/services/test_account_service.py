"""
Tests for the AccountService (the chart of accounts).

Tests cover:
- Account creation, opening balances and code uniqueness
- Account class validation
- The normal-balance sign convention for all five classes
- Deactivation
- Listing order and filters
"""

from decimal import Decimal

import pytest

from bookkeeping.exceptions import NotFoundError, ValidationError
from bookkeeping.models.enums import AccountClass
from bookkeeping.schemas.account import AccountCreate
from bookkeeping.services.account_service import (
    AccountService,
    parse_account_class,
)
from tests.helpers import make_account, make_organization


# --- Account Creation Tests ---

class TestCreateAccount:

    def test_create_account_succeeds(self, storage):
        org = make_organization(storage)
        account = make_account(storage, org.id, "1111", "asset", name="Cash")

        assert account.id is not None
        assert account.organization_id == org.id
        assert account.code == "1111"
        assert account.account_class == AccountClass.ASSET
        assert account.is_active is True
        assert account.balance == Decimal("0")

    def test_opening_balance_seeds_balance(self, storage):
        org = make_organization(storage)
        account = make_account(
            storage, org.id, "1112", "asset", opening_balance="850.50"
        )

        assert account.balance == Decimal("850.50")
        assert account.opening_balance == Decimal("850.50")

    def test_account_class_is_case_insensitive(self, storage):
        org = make_organization(storage)
        account = make_account(storage, org.id, "4100", "Revenue")

        assert account.account_class == AccountClass.REVENUE

    def test_invalid_account_class_rejected(self, storage):
        org = make_organization(storage)

        with pytest.raises(ValidationError, match="Invalid account class"):
            make_account(storage, org.id, "9000", "income")

        assert AccountService(storage).list_accounts(org.id) == []

    def test_invalid_account_class_hides_lookup_error(self):
        with pytest.raises(ValidationError) as exc:
            parse_account_class("income")

        assert exc.value.__cause__ is None
        assert exc.value.__suppress_context__ is True

    def test_duplicate_code_rejected(self, storage):
        org = make_organization(storage)
        make_account(storage, org.id, "1111", "asset")

        with pytest.raises(ValidationError, match="already exists"):
            make_account(storage, org.id, "1111", "asset")

    def test_same_code_allowed_in_other_organization(self, storage):
        org_a = make_organization(storage, name="A")
        org_b = make_organization(storage, name="B")
        make_account(storage, org_a.id, "1111", "asset")

        account = make_account(storage, org_b.id, "1111", "asset")

        assert account.organization_id == org_b.id

    def test_unknown_organization_rejected(self, storage):
        with pytest.raises(NotFoundError, match="Organization 999"):
            make_account(storage, 999, "1111", "asset")

    def test_parent_must_belong_to_same_organization(self, storage):
        org_a = make_organization(storage, name="A")
        org_b = make_organization(storage, name="B")
        parent = make_account(storage, org_a.id, "1000", "asset")

        with pytest.raises(NotFoundError, match="Parent account"):
            make_account(
                storage, org_b.id, "1100", "asset", parent_id=parent.id
            )

    def test_parent_reference_kept(self, storage):
        org = make_organization(storage)
        parent = make_account(storage, org.id, "1000", "asset")
        child = make_account(storage, org.id, "1100", "asset", parent_id=parent.id)

        assert child.parent_id == parent.id


# --- Sign Convention Tests ---

class TestApplyEntryEffect:
    """
    The single most important rule of the registry.

    Debit-normal classes grow with debits; credit-normal classes
    grow with credits.
    """

    @pytest.mark.parametrize("account_class, expected", [
        ("asset", Decimal("70.00")),
        ("expense", Decimal("70.00")),
        ("liability", Decimal("-70.00")),
        ("equity", Decimal("-70.00")),
        ("revenue", Decimal("-70.00")),
    ])
    def test_net_debit_effect(self, storage, account_class, expected):
        org = make_organization(storage)
        account = make_account(storage, org.id, "1000", account_class)
        service = AccountService(storage)

        with storage.atomic():
            service.apply_entry_effect(
                account.id, Decimal("100.00"), Decimal("30.00")
            )

        assert service.get_account(account.id).balance == expected

    @pytest.mark.parametrize("account_class, expected", [
        ("asset", Decimal("-25.00")),
        ("expense", Decimal("-25.00")),
        ("liability", Decimal("25.00")),
        ("equity", Decimal("25.00")),
        ("revenue", Decimal("25.00")),
    ])
    def test_credit_only_effect(self, storage, account_class, expected):
        org = make_organization(storage)
        account = make_account(storage, org.id, "1000", account_class)
        service = AccountService(storage)

        with storage.atomic():
            service.apply_entry_effect(account.id, Decimal("0"), Decimal("25.00"))

        assert service.get_account(account.id).balance == expected

    def test_effect_adds_to_opening_balance(self, storage):
        org = make_organization(storage)
        account = make_account(
            storage, org.id, "2100", "liability", opening_balance="45000"
        )
        service = AccountService(storage)

        with storage.atomic():
            service.apply_entry_effect(
                account.id, Decimal("5000"), Decimal("0")
            )

        assert service.get_account(account.id).balance == Decimal("40000")

    def test_unknown_account_rejected(self, storage):
        service = AccountService(storage)

        with pytest.raises(NotFoundError, match="Account 404"):
            service.apply_entry_effect(404, Decimal("1"), Decimal("0"))


# --- Deactivation Tests ---

class TestDeactivateAccount:

    def test_deactivate_keeps_balance(self, storage):
        org = make_organization(storage)
        account = make_account(
            storage, org.id, "1112", "asset", opening_balance="100"
        )
        service = AccountService(storage)

        service.deactivate_account(account.id)

        reloaded = service.get_account(account.id)
        assert reloaded.is_active is False
        assert reloaded.balance == Decimal("100")

    def test_deactivate_unknown_account(self, storage):
        with pytest.raises(NotFoundError):
            AccountService(storage).deactivate_account(12345)


# --- Listing Tests ---

class TestListAccounts:

    def test_insertion_order(self, storage):
        org = make_organization(storage)
        for code, account_class in [
            ("5100", "expense"), ("1111", "asset"), ("4100", "revenue"),
        ]:
            make_account(storage, org.id, code, account_class)

        codes = [a.code for a in AccountService(storage).list_accounts(org.id)]

        assert codes == ["5100", "1111", "4100"]

    def test_only_own_organization(self, storage):
        org_a = make_organization(storage, name="A")
        org_b = make_organization(storage, name="B")
        make_account(storage, org_a.id, "1111", "asset")
        make_account(storage, org_b.id, "2100", "liability")

        accounts = AccountService(storage).list_accounts(org_a.id)

        assert [a.code for a in accounts] == ["1111"]

    def test_filters(self, storage):
        org = make_organization(storage)
        make_account(storage, org.id, "1111", "asset")
        closed = make_account(storage, org.id, "1112", "asset")
        make_account(storage, org.id, "4100", "revenue")
        service = AccountService(storage)
        service.deactivate_account(closed.id)

        assets = service.list_accounts(org.id, account_class=AccountClass.ASSET)
        active = service.list_accounts(org.id, include_inactive=False)

        assert [a.code for a in assets] == ["1111", "1112"]
        assert [a.code for a in active] == ["1111", "4100"]

    def test_unknown_organization_is_empty(self, storage):
        assert AccountService(storage).list_accounts(999) == []


def test_create_account_request_accepts_enum(storage):
    org = make_organization(storage)
    account = AccountService(storage).create_account(
        org.id,
        AccountCreate(code="3000", name="Equity", account_class=AccountClass.EQUITY),
    )

    assert account.account_class == AccountClass.EQUITY
