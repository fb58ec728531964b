"""Business logic services."""

from bookkeeping.services.account_service import AccountService
from bookkeeping.services.ledger_service import LedgerService
from bookkeeping.services.report_service import ReportService
from bookkeeping.services.organization_service import OrganizationService
from bookkeeping.services.quick_entry_service import QuickEntryService

__all__ = [
    "AccountService",
    "LedgerService",
    "ReportService",
    "OrganizationService",
    "QuickEntryService",
]
