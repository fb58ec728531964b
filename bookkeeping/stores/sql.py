"""
Relational storage on top of a SQLAlchemy session.

The session's transaction is the atomic unit: the outermost
atomic() block commits on success and rolls back on any error.
Rolling back expires every loaded object, so balances changed
in memory are reloaded from the database on next access.
"""

import threading
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from bookkeeping.models.account import Account
from bookkeeping.models.journal_entry import JournalEntry, JournalEntryDetail
from bookkeeping.models.organization import Organization
from bookkeeping.stores.base import AccountStore, EntryStore, Storage

# Writers of one organization in this process, keyed by (database url,
# organization id). SQLite has no row locks, so FOR UPDATE alone does
# not serialize them.
_organization_locks: dict[tuple[str, int], threading.RLock] = {}
_organization_locks_guard = threading.Lock()


def _organization_lock(database_url: str, organization_id: int):
    with _organization_locks_guard:
        return _organization_locks.setdefault(
            (database_url, organization_id), threading.RLock()
        )


class SqlAccountStore(AccountStore):

    def __init__(self, db: Session):
        self.db = db

    def add_organization(self, organization: Organization) -> Organization:
        self.db.add(organization)
        self.db.flush()
        return organization

    def get_organization(self, organization_id: int) -> Organization | None:
        return self.db.get(Organization, organization_id)

    def allocate_entry_sequence(self, organization_id: int) -> int:
        # Increment the locked counter row; never count rows and add one
        organization = self.db.execute(
            select(Organization)
            .where(Organization.id == organization_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).scalar_one()
        organization.last_entry_sequence = (
            organization.last_entry_sequence or 0
        ) + 1
        self.db.flush()
        return organization.last_entry_sequence

    def add_account(self, account: Account) -> Account:
        self.db.add(account)
        self.db.flush()
        return account

    def get_account(self, account_id: int) -> Account | None:
        return self.db.get(Account, account_id)

    def save_account(self, account: Account) -> Account:
        self.db.add(account)
        self.db.flush()
        return account

    def list_accounts(self, organization_id: int) -> list[Account]:
        accounts = self.db.execute(
            select(Account)
            .where(Account.organization_id == organization_id)
            .order_by(Account.id)
        ).scalars().all()
        return list(accounts)

    def find_account_by_code(
        self, organization_id: int, code: str
    ) -> Account | None:
        return self.db.execute(
            select(Account).where(
                Account.organization_id == organization_id,
                Account.code == code,
            )
        ).scalar_one_or_none()


class SqlEntryStore(EntryStore):

    def __init__(self, db: Session):
        self.db = db

    def add_entry(self, entry: JournalEntry) -> JournalEntry:
        # Details are saved through the relationship cascade
        self.db.add(entry)
        self.db.flush()
        return entry

    def get_entry(self, entry_id: int) -> JournalEntry | None:
        return self.db.get(
            JournalEntry, entry_id, options=[selectinload(JournalEntry.details)]
        )

    def list_entries(self, organization_id: int) -> list[JournalEntry]:
        entries = self.db.execute(
            select(JournalEntry)
            .where(JournalEntry.organization_id == organization_id)
            .options(selectinload(JournalEntry.details))
            .order_by(JournalEntry.id)
        ).scalars().all()
        return list(entries)

    def list_details_for_account(
        self, account_id: int
    ) -> list[JournalEntryDetail]:
        details = self.db.execute(
            select(JournalEntryDetail)
            .where(JournalEntryDetail.account_id == account_id)
            .order_by(JournalEntryDetail.id)
        ).scalars().all()
        return list(details)


class SqlStorage(Storage):
    """
    Storage bound to one session.

    The session should not be shared between threads; the API
    layer creates one per request through get_db().
    """

    def __init__(self, db: Session):
        self.db = db
        self.accounts = SqlAccountStore(db)
        self.entries = SqlEntryStore(db)
        self._depth = 0

    @contextmanager
    def atomic(self):
        self._depth += 1
        try:
            yield
            if self._depth == 1:
                self.db.flush()
                self.db.commit()
        except BaseException:
            if self._depth == 1:
                self.db.rollback()
            raise
        finally:
            self._depth -= 1

    @contextmanager
    def lock_organization(self, organization_id: int):
        exists = self.db.execute(
            select(Organization.id).where(Organization.id == organization_id)
        ).scalar_one_or_none()
        if exists is None:
            # Nothing to serialize; the caller's existence check fails
            yield
            return

        database_url = str(self.db.get_bind().url)
        with _organization_lock(database_url, organization_id):
            # The row lock covers other processes on databases that
            # support it and is held until the transaction ends.
            self.db.execute(
                select(Organization.id)
                .where(Organization.id == organization_id)
                .with_for_update()
            )
            yield

