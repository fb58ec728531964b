"""
Storage interfaces used by the services.

Services never talk to a database or a dict directly. They get a
Storage, which bundles an AccountStore, an EntryStore and the two
guarantees the ledger needs from whatever sits underneath:

- atomic(): everything done inside the block becomes visible
  together, or not at all.
- lock_organization(): only one writer at a time per organization.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from bookkeeping.models.account import Account
from bookkeeping.models.journal_entry import JournalEntry, JournalEntryDetail
from bookkeeping.models.organization import Organization


class AccountStore(ABC):

    @abstractmethod
    def add_organization(self, organization: Organization) -> Organization:
        ...

    @abstractmethod
    def get_organization(self, organization_id: int) -> Organization | None:
        ...

    @abstractmethod
    def allocate_entry_sequence(self, organization_id: int) -> int:
        """
        Hand out the organization's next journal entry sequence.

        Increments the counter kept on the organization. Must run inside
        atomic() so a failed unit gives the number back.
        """
        ...

    @abstractmethod
    def add_account(self, account: Account) -> Account:
        ...

    @abstractmethod
    def get_account(self, account_id: int) -> Account | None:
        ...

    @abstractmethod
    def save_account(self, account: Account) -> Account:
        """Persist changes made to an account fetched from this store."""
        ...

    @abstractmethod
    def list_accounts(self, organization_id: int) -> list[Account]:
        """Return the organization's accounts in insertion order."""
        ...

    @abstractmethod
    def find_account_by_code(
        self, organization_id: int, code: str
    ) -> Account | None:
        ...


class EntryStore(ABC):

    @abstractmethod
    def add_entry(self, entry: JournalEntry) -> JournalEntry:
        """Persist an entry together with its details."""
        ...

    @abstractmethod
    def get_entry(self, entry_id: int) -> JournalEntry | None:
        ...

    @abstractmethod
    def list_entries(self, organization_id: int) -> list[JournalEntry]:
        """Return the organization's entries, oldest first."""
        ...

    @abstractmethod
    def list_details_for_account(
        self, account_id: int
    ) -> list[JournalEntryDetail]:
        ...


class Storage(ABC):
    """A unit of persistence handed to every service."""

    accounts: AccountStore
    entries: EntryStore

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """
        Group writes into one all-or-nothing unit.

        If the block raises, every write made inside it is undone
        and the exception propagates. Units may nest; only the
        outermost one decides the outcome.
        """
        ...

    @abstractmethod
    def lock_organization(self, organization_id: int) -> AbstractContextManager:
        """Serialize writers of one organization's ledger."""
        ...
