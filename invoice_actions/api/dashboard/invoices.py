"""Invoice form actions and the listing they redirect to"""

from typing import Optional
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from invoice_actions.api.dashboard.schemas import FormState, InvoiceItem, InvoiceListResponse
from invoice_actions.api.dependencies import get_mutation_handler, get_page_cache, get_request_id
from invoice_actions.config import settings
from invoice_actions.domain.models import MutationOutcome, PersistFailed, Success, ValidationFailed
from invoice_actions.domain.mutations import ValidatedMutationHandler
from invoice_actions.infrastructure.cache import PageCache
from invoice_actions.infrastructure.database.repositories import InvoiceRepository
from invoice_actions.infrastructure.database.session import get_db
from invoice_actions.infrastructure.observability.logging import log_mutation
from invoice_actions.infrastructure.observability.metrics import record_mutation

router = APIRouter()


@router.get("", response_model=InvoiceListResponse)
def list_invoices(
    db: Session = Depends(get_db),
    cache: PageCache = Depends(get_page_cache),
):
    """
    Invoice listing, the page every successful create and edit lands on.

    Served from the page cache until a mutation revalidates it.
    """

    def render() -> dict:
        invoices = InvoiceRepository(db).list_invoices()
        return InvoiceListResponse(
            invoices=[
                InvoiceItem(
                    id=inv.id,
                    customer_id=inv.customer_id,
                    amount_cents=inv.amount_cents,
                    status=inv.status,
                    date=inv.date,
                )
                for inv in invoices
            ]
        ).model_dump(mode="json")

    return cache.get_or_render(settings.invoices_path, render)


@router.post("/create")
def create_invoice(
    request: Request,
    customer_id: Optional[str] = Form(None, alias="customerId"),
    amount: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    handler: ValidatedMutationHandler = Depends(get_mutation_handler),
):
    """Create an invoice from the create form; redirects to the listing on success"""
    outcome = handler.create_invoice({"customerId": customer_id, "amount": amount, "status": status})
    return _respond("create", outcome, get_request_id(request))


@router.post("/{invoice_id}/edit")
def update_invoice(
    invoice_id: str,
    request: Request,
    customer_id: Optional[str] = Form(None, alias="customerId"),
    amount: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    handler: ValidatedMutationHandler = Depends(get_mutation_handler),
):
    """Apply the edit form to an invoice; redirects to the listing on success"""
    outcome = handler.update_invoice(invoice_id, {"customerId": customer_id, "amount": amount, "status": status})
    return _respond("update", outcome, get_request_id(request), invoice_id)


@router.post("/{invoice_id}/delete")
def delete_invoice(
    invoice_id: str,
    request: Request,
    handler: ValidatedMutationHandler = Depends(get_mutation_handler),
):
    """Delete an invoice from the listing; 204 on success, the listing re-renders itself"""
    outcome = handler.delete_invoice(invoice_id)
    return _respond("delete", outcome, get_request_id(request), invoice_id)


def _respond(operation: str, outcome: MutationOutcome, request_id: str, invoice_id: Optional[str] = None) -> Response:
    """Translate a mutation outcome into the HTTP response the form expects"""
    if isinstance(outcome, Success):
        label = "success"
        if outcome.navigate_to:
            response = RedirectResponse(outcome.navigate_to, status_code=303)
        else:
            response = Response(status_code=204)
    elif isinstance(outcome, ValidationFailed):
        label = "validation_failed"
        state = FormState(errors=outcome.errors, message=outcome.message)
        response = JSONResponse(status_code=422, content=state.model_dump())
    elif isinstance(outcome, PersistFailed):
        label = "persist_failed"
        state = FormState(message=outcome.message)
        response = JSONResponse(status_code=500, content=state.model_dump(exclude_none=True))
    else:
        raise TypeError(f"Unknown mutation outcome: {outcome!r}")

    record_mutation(operation, label)
    log_mutation(operation, label, invoice_id=invoice_id, request_id=request_id)
    return response
