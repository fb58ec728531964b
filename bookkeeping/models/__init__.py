"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from bookkeeping.models.base import Base
from bookkeeping.models.enums import AccountClass, TrialBalanceMode
from bookkeeping.models.organization import Organization
from bookkeeping.models.account import Account
from bookkeeping.models.journal_entry import JournalEntry, JournalEntryDetail

__all__ = [
    "Base",
    "AccountClass",
    "TrialBalanceMode",
    "Organization",
    "Account",
    "JournalEntry",
    "JournalEntryDetail",
]
