"""
Journal entry models.

A JournalEntry is one business event (a sale, a payment, ...).
It exclusively owns its JournalEntryDetail lines; each line
debits or credits a single account. The sum of debits always
equals the sum of credits. Entries are immutable — once
committed, they are never modified or deleted.
"""

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import (
    String, Text, Date, DateTime, Numeric, ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeping.models.base import Base


class JournalEntry(Base):
    """
    The header of a committed double-entry transaction.

    The balance invariant is enforced by the LedgerService,
    not by the model — the model is just the data structure.
    """

    __tablename__ = "journal_entries"
    __table_args__ = (
        UniqueConstraint(
            "organization_id",
            "entry_number",
            name="uq_journal_entries_organization_number",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id"), nullable=False, index=True
    )
    entry_number: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    entry_date: Mapped[date] = mapped_column(Date, nullable=False)
    reference: Mapped[str | None] = mapped_column(
        String(255), nullable=True, default=None
    )
    total_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    created_by: Mapped[str | None] = mapped_column(
        String(100), nullable=True, default=None
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    # Lines live and die with their entry
    details: Mapped[list["JournalEntryDetail"]] = relationship(
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="JournalEntryDetail.id",
    )

    def __repr__(self) -> str:
        return f"<JournalEntry {self.entry_number} {self.total_amount}>"


class JournalEntryDetail(Base):
    """A single debit or credit line of a journal entry."""

    __tablename__ = "journal_entry_details"

    id: Mapped[int] = mapped_column(primary_key=True)
    entry_id: Mapped[int] = mapped_column(
        ForeignKey("journal_entries.id"), nullable=False, index=True
    )
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    debit: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    credit: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False, default=Decimal("0")
    )
    description: Mapped[str | None] = mapped_column(
        String(255), nullable=True, default=None
    )

    entry: Mapped["JournalEntry"] = relationship(back_populates="details")

    def __repr__(self) -> str:
        return (
            f"<JournalEntryDetail account={self.account_id} "
            f"debit={self.debit} credit={self.credit}>"
        )
