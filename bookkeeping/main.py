"""
Bookkeeping Ledger — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

import uvicorn
from fastapi import FastAPI

from bookkeeping.config import get_settings
from bookkeeping.logging_config import configure_logging
from bookkeeping.api.health import router as health_router
from bookkeeping.api.organizations import router as organizations_router
from bookkeeping.api.accounts import router as accounts_router
from bookkeeping.api.journal import router as journal_router
from bookkeeping.api.reports import router as reports_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Multi-tenant double-entry bookkeeping ledger",
)

# Register routers
app.include_router(health_router)
app.include_router(organizations_router)
app.include_router(accounts_router)
app.include_router(journal_router)
app.include_router(reports_router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
