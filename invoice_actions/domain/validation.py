"""Form parsing boundary: raw submitted fields -> InvoiceDraft or per-field messages"""

from decimal import Decimal
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from invoice_actions.domain.models import (
    FieldErrors,
    Invalid,
    InvoiceDraft,
    InvoiceStatus,
    Valid,
    ValidationResult,
)

FORM_FIELDS = ("customerId", "amount", "status")

AMOUNT_TOO_LOW = "Please enter an amount greater than $0."

# Keeps cents well inside a BIGINT and the default 28-digit decimal context
MAX_AMOUNT = Decimal("999999999999.99")

# field -> pydantic error type -> user-facing message ("*" is the fallback)
FIELD_MESSAGES = {
    "customerId": {"*": "Please select a customer."},
    "amount": {
        "greater_than": AMOUNT_TOO_LOW,
        "missing": AMOUNT_TOO_LOW,
        "*": "Please enter a valid amount.",
    },
    "status": {"*": "Please select an invoice status."},
}


class InvoiceForm(BaseModel):
    """Schema shared by the create and edit forms"""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    customer_id: str = Field(..., alias="customerId", min_length=1)
    amount: Decimal = Field(..., gt=0, le=MAX_AMOUNT, allow_inf_nan=False)
    status: InvoiceStatus

    def to_draft(self) -> InvoiceDraft:
        return InvoiceDraft(customer_id=self.customer_id, amount=self.amount, status=self.status)


def flatten_errors(exc: ValidationError) -> FieldErrors:
    """Collapse pydantic errors into field -> ordered, de-duplicated messages"""
    field_errors: FieldErrors = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "form"
        messages = FIELD_MESSAGES.get(field, {})
        message = messages.get(error["type"]) or messages.get("*") or error["msg"]
        bucket = field_errors.setdefault(field, [])
        if message not in bucket:
            bucket.append(message)
    return field_errors


def validate(raw_input: Mapping[str, Any]) -> ValidationResult:
    """
    Validate submitted invoice form fields.

    Only customerId, amount and status are read. Absent, null and blank
    fields are all reported as missing. Never raises for bad input.

    Returns:
        Valid with an InvoiceDraft, or Invalid with messages keyed by form field name
    """
    payload = {}
    for name in FORM_FIELDS:
        value = raw_input.get(name)
        if isinstance(value, str) and not value.strip():
            continue
        if value is not None:
            payload[name] = value

    try:
        form = InvoiceForm.model_validate(payload)
    except ValidationError as exc:
        return Invalid(field_errors=flatten_errors(exc))

    return Valid(data=form.to_draft())
