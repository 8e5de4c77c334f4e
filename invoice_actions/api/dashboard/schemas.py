"""Pydantic schemas for dashboard responses"""

from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel

from invoice_actions.domain.models import InvoiceStatus


class FormState(BaseModel):
    """State handed back to an invoice form after a failed action"""

    errors: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None


class InvoiceItem(BaseModel):
    """Single row of the invoice listing"""

    id: str
    customer_id: str
    amount_cents: int
    status: InvoiceStatus
    date: date


class InvoiceListResponse(BaseModel):
    """Response for GET /dashboard/invoices"""

    invoices: List[InvoiceItem]
