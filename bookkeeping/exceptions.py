"""
Typed errors raised by the ledger core.

Services raise these and never swallow them. The API layer
catches them by type and maps them to HTTP status codes:

    BookkeepingError
    +-- ValidationError        -> 400
    |   +-- UnbalancedEntryError -> 400
    +-- NotFoundError          -> 404
"""

from decimal import Decimal


class BookkeepingError(Exception):
    """Base class for every error raised by the ledger core."""


class ValidationError(BookkeepingError):
    """Input is malformed or violates a ledger rule. Caller-correctable."""


class UnbalancedEntryError(ValidationError):
    """Total debits of a journal entry differ from total credits."""

    def __init__(self, total_debit: Decimal, total_credit: Decimal):
        self.total_debit = total_debit
        self.total_credit = total_credit
        super().__init__(
            f"Entry does not balance: "
            f"debits={total_debit}, credits={total_credit}"
        )


class NotFoundError(BookkeepingError):
    """A referenced organization, account or entry does not exist."""

    def __init__(self, entity: str, identifier):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} {identifier} not found")
