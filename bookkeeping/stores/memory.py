"""
In-memory storage.

Keeps organizations, accounts and entries in dictionaries owned
by a single InMemoryStorage instance. Used for tests and for
single-process deployments where durability is not needed.

Atomicity works with an undo record per unit: while a unit is
open on the current thread, every account handed out by the
store has its mutable fields remembered the first time it is
seen, and every added record is noted. If the unit fails, the
remembered values are written back and the added records are
removed.
"""

import itertools
import logging
import threading
from collections import defaultdict
from contextlib import contextmanager

from bookkeeping.models.account import Account
from bookkeeping.models.journal_entry import JournalEntry, JournalEntryDetail
from bookkeeping.models.organization import Organization
from bookkeeping.stores.base import AccountStore, EntryStore, Storage

logger = logging.getLogger(__name__)


class _UndoRecord:
    """What to put back if the current unit fails."""

    def __init__(self):
        self.accounts: dict[int, tuple] = {}
        self.sequences: dict[int, tuple] = {}
        self.added_organizations: list[int] = []
        self.added_accounts: list[int] = []
        self.added_entries: list[int] = []

    def remember(self, account: Account) -> None:
        if account.id not in self.accounts:
            self.accounts[account.id] = (
                account,
                account.balance,
                account.is_active,
            )

    def remember_sequence(self, organization: Organization) -> None:
        if organization.id not in self.sequences:
            self.sequences[organization.id] = (
                organization,
                organization.last_entry_sequence,
            )


class _State:
    """Shared dictionaries plus the per-thread open unit."""

    def __init__(self):
        self.mutex = threading.RLock()
        self.organizations: dict[int, Organization] = {}
        self.accounts: dict[int, Account] = {}
        self.accounts_by_org: dict[int, list[int]] = defaultdict(list)
        self.entries: dict[int, JournalEntry] = {}
        self.entries_by_org: dict[int, list[int]] = defaultdict(list)
        self.organization_ids = itertools.count(1)
        self.account_ids = itertools.count(1)
        self.entry_ids = itertools.count(1)
        self.detail_ids = itertools.count(1)
        self.local = threading.local()

    @property
    def undo(self) -> _UndoRecord | None:
        return getattr(self.local, "undo", None)

    def track(self, account: Account | None) -> Account | None:
        if account is not None and self.undo is not None:
            self.undo.remember(account)
        return account


class InMemoryAccountStore(AccountStore):

    def __init__(self, state: _State):
        self._state = state

    def add_organization(self, organization: Organization) -> Organization:
        with self._state.mutex:
            organization.id = next(self._state.organization_ids)
            self._state.organizations[organization.id] = organization
        if self._state.undo is not None:
            self._state.undo.added_organizations.append(organization.id)
        return organization

    def get_organization(self, organization_id: int) -> Organization | None:
        return self._state.organizations.get(organization_id)

    def allocate_entry_sequence(self, organization_id: int) -> int:
        with self._state.mutex:
            organization = self._state.organizations[organization_id]
            if self._state.undo is not None:
                self._state.undo.remember_sequence(organization)
            organization.last_entry_sequence = (
                organization.last_entry_sequence or 0
            ) + 1
            return organization.last_entry_sequence

    def add_account(self, account: Account) -> Account:
        with self._state.mutex:
            account.id = next(self._state.account_ids)
            self._state.accounts[account.id] = account
            self._state.accounts_by_org[account.organization_id].append(
                account.id
            )
        if self._state.undo is not None:
            self._state.undo.added_accounts.append(account.id)
        return account

    def get_account(self, account_id: int) -> Account | None:
        return self._state.track(self._state.accounts.get(account_id))

    def save_account(self, account: Account) -> Account:
        # Objects are shared with the caller, so changes are already
        # in place. The store only checks that it knows the account.
        if account.id not in self._state.accounts:
            raise KeyError(f"Account {account.id} is not stored")
        return account

    def list_accounts(self, organization_id: int) -> list[Account]:
        with self._state.mutex:
            ids = list(self._state.accounts_by_org.get(organization_id, ()))
        return [self._state.track(self._state.accounts[i]) for i in ids]

    def find_account_by_code(
        self, organization_id: int, code: str
    ) -> Account | None:
        for account in self.list_accounts(organization_id):
            if account.code == code:
                return account
        return None


class InMemoryEntryStore(EntryStore):

    def __init__(self, state: _State):
        self._state = state

    def add_entry(self, entry: JournalEntry) -> JournalEntry:
        with self._state.mutex:
            entry.id = next(self._state.entry_ids)
            for detail in entry.details:
                detail.id = next(self._state.detail_ids)
                detail.entry_id = entry.id
            self._state.entries[entry.id] = entry
            self._state.entries_by_org[entry.organization_id].append(entry.id)
        if self._state.undo is not None:
            self._state.undo.added_entries.append(entry.id)
        return entry

    def get_entry(self, entry_id: int) -> JournalEntry | None:
        return self._state.entries.get(entry_id)

    def list_entries(self, organization_id: int) -> list[JournalEntry]:
        with self._state.mutex:
            ids = list(self._state.entries_by_org.get(organization_id, ()))
        return [self._state.entries[i] for i in ids]

    def list_details_for_account(
        self, account_id: int
    ) -> list[JournalEntryDetail]:
        with self._state.mutex:
            entries = list(self._state.entries.values())
        return [
            detail
            for entry in entries
            for detail in entry.details
            if detail.account_id == account_id
        ]


class InMemoryStorage(Storage):
    """
    Dictionary-backed Storage.

    One instance is one independent ledger database. A per-organization
    lock is created the first time an existing organization is locked,
    and dropped again if the unit that created the organization fails.
    """

    def __init__(self):
        self._state = _State()
        self._locks: dict[int, threading.RLock] = {}
        self._locks_guard = threading.Lock()
        self.accounts = InMemoryAccountStore(self._state)
        self.entries = InMemoryEntryStore(self._state)

    @contextmanager
    def atomic(self):
        if self._state.undo is not None:
            # Nested unit: the outer unit owns the undo record
            yield
            return

        self._state.local.undo = _UndoRecord()
        try:
            yield
        except BaseException:
            self._rollback(self._state.undo)
            raise
        finally:
            self._state.local.undo = None

    @contextmanager
    def lock_organization(self, organization_id: int):
        with self._locks_guard:
            if organization_id not in self._state.organizations:
                lock = None
            else:
                lock = self._locks.setdefault(
                    organization_id, threading.RLock()
                )
        if lock is None:
            # Nothing to serialize; the caller's existence check fails
            yield
            return
        with lock:
            yield

    def _rollback(self, undo: _UndoRecord) -> None:
        state = self._state
        with state.mutex:
            for account, balance, is_active in undo.accounts.values():
                account.balance = balance
                account.is_active = is_active

            for organization, sequence in undo.sequences.values():
                organization.last_entry_sequence = sequence

            for entry_id in undo.added_entries:
                entry = state.entries.pop(entry_id, None)
                if entry is not None:
                    state.entries_by_org[entry.organization_id].remove(
                        entry_id
                    )

            for account_id in undo.added_accounts:
                account = state.accounts.pop(account_id, None)
                if account is not None:
                    state.accounts_by_org[account.organization_id].remove(
                        account_id
                    )

            for organization_id in undo.added_organizations:
                state.organizations.pop(organization_id, None)

        with self._locks_guard:
            for organization_id in undo.added_organizations:
                self._locks.pop(organization_id, None)

        logger.debug(
            "Rolled back in-memory unit: %d accounts restored, "
            "%d entries removed",
            len(undo.accounts),
            len(undo.added_entries),
        )
