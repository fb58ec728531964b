"""
Shared enumerations for database models.

Using Python enums mapped to database enums ensures that
only valid values can be stored. An invalid account class
is caught at the database level, not just in Python validation.
"""

import enum


class AccountClass(str, enum.Enum):
    """The five fundamental accounting categories."""
    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"

    @property
    def is_debit_normal(self) -> bool:
        """Assets and expenses increase with debits; the rest with credits."""
        return self in (AccountClass.ASSET, AccountClass.EXPENSE)


class TrialBalanceMode(str, enum.Enum):
    """How account balances are placed into debit/credit columns."""
    # Column chosen by the sign of the balance alone
    SIGNED = "signed"
    # Column chosen by the account class's normal balance
    NORMAL_BALANCE = "normal_balance"
