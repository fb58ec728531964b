"""
Account model (chart of accounts).

Every account an organization posts to (cash, bank, sales,
administrative expenses, ...) is an Account. Entries are
posted against these accounts.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, Boolean, DateTime, Numeric, ForeignKey,
    UniqueConstraint, Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column

from bookkeeping.models.base import Base
from bookkeeping.models.enums import AccountClass


class Account(Base):
    """
    A single account in an organization's chart of accounts.

    The balance is a running total maintained by the ledger:
    it starts at opening_balance and changes only when a journal
    entry referencing the account is committed. Accounts are
    never deleted, only deactivated via is_active=False.

    parent_id is a lookup key into the same organization's
    accounts, not an ownership edge.
    """

    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint(
            "organization_id", "code", name="uq_accounts_organization_code"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False, index=True
    )
    code: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    account_class: Mapped[AccountClass] = mapped_column(
        SAEnum(
            AccountClass,
            name="account_class_enum",
            create_constraint=True,
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
    )
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("accounts.id"), nullable=True, default=None
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True
    )
    opening_balance: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    balance: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    def signed_effect(self, debit: Decimal, credit: Decimal) -> Decimal:
        """
        Return how much a debit/credit pair moves this account's balance.

        For ASSET and EXPENSE accounts: debit - credit
        For LIABILITY, EQUITY, and REVENUE: credit - debit
        """
        if self.account_class.is_debit_normal:
            return debit - credit
        return credit - debit

    def __repr__(self) -> str:
        return f"<Account {self.code} ({self.account_class.value})>"
