"""Dependency injection for FastAPI endpoints"""

from functools import partial
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from invoice_actions.config import settings
from invoice_actions.domain.mutations import ValidatedMutationHandler
from invoice_actions.infrastructure.cache import PageCache
from invoice_actions.infrastructure.database.repositories import InvoiceRepository
from invoice_actions.infrastructure.database.session import get_db
from invoice_actions.utils.date_utils import today

# Shared by every request in the process
page_cache = PageCache()


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_page_cache() -> PageCache:
    """Provide the process-wide page cache"""
    return page_cache


def get_mutation_handler(
    db: Session = Depends(get_db),
    cache: PageCache = Depends(get_page_cache),
) -> ValidatedMutationHandler:
    """Provide a mutation handler bound to this request's session"""
    return ValidatedMutationHandler(
        store=InvoiceRepository(db),
        revalidator=cache,
        listing_path=settings.invoices_path,
        clock=partial(today, settings.invoice_date_timezone),
        strict_update_errors=settings.strict_update_errors,
    )
