"""Validated invoice mutations: parse form input, write one statement, report the outcome"""

import logging
from datetime import date
from typing import Any, Callable, Mapping, Protocol

from invoice_actions.domain.exceptions import StorageError
from invoice_actions.domain.models import (
    Invalid,
    InvoiceDraft,
    InvoiceStatus,
    MutationOutcome,
    PersistFailed,
    Success,
    ValidationFailed,
    ValidationResult,
)
from invoice_actions.domain.money import to_cents
from invoice_actions.domain.validation import validate
from invoice_actions.utils.date_utils import to_iso_date

CREATE_INVALID_MESSAGE = "Missing fields. Failed to create invoice."
UPDATE_INVALID_MESSAGE = "Missing fields. Failed to update invoice."
CREATE_FAILED_MESSAGE = "Failed to create an invoice."
UPDATE_FAILED_MESSAGE = "Failed to update the invoice."
DELETE_FAILED_MESSAGE = "Database Error: Failed to delete the invoice"


class InvoiceStore(Protocol):
    """Storage collaborator; each method runs a single statement and raises StorageError on failure"""

    def insert_invoice(self, customer_id: str, amount_cents: int, status: InvoiceStatus, invoice_date: date) -> str: ...

    def update_invoice(self, invoice_id: str, customer_id: str, amount_cents: int, status: InvoiceStatus) -> int: ...

    def delete_invoice(self, invoice_id: str) -> int: ...


class PathRevalidator(Protocol):
    """Page collaborator that drops cached renders of a route"""

    def revalidate_path(self, path: str) -> None: ...


class ValidatedMutationHandler:
    """
    Create, update and delete invoices from submitted form fields.

    Every operation issues at most one statement through the injected store and
    returns a MutationOutcome instead of raising. On success the listing path
    is revalidated; create and update also ask the caller to navigate there.
    """

    def __init__(
        self,
        store: InvoiceStore,
        revalidator: PathRevalidator,
        listing_path: str,
        clock: Callable[[], date],
        strict_update_errors: bool = False,
    ):
        self.store = store
        self.revalidator = revalidator
        self.listing_path = listing_path
        self.clock = clock
        self.strict_update_errors = strict_update_errors

    @staticmethod
    def validate(raw_input: Mapping[str, Any]) -> ValidationResult:
        return validate(raw_input)

    def create_invoice(self, raw_input: Mapping[str, Any]) -> MutationOutcome:
        """Validate a create-form submission and insert it"""
        result = validate(raw_input)
        if isinstance(result, Invalid):
            return ValidationFailed(errors=result.field_errors, message=CREATE_INVALID_MESSAGE)
        return self.create(result.data)

    def update_invoice(self, invoice_id: str, raw_input: Mapping[str, Any]) -> MutationOutcome:
        """Validate an edit-form submission and apply it to invoice_id"""
        result = validate(raw_input)
        if isinstance(result, Invalid):
            return ValidationFailed(errors=result.field_errors, message=UPDATE_INVALID_MESSAGE)
        return self.update(invoice_id, result.data)

    def create(self, draft: InvoiceDraft) -> MutationOutcome:
        amount_cents = to_cents(draft.amount)
        invoice_date = self.clock()

        try:
            invoice_id = self.store.insert_invoice(draft.customer_id, amount_cents, draft.status, invoice_date)
        except StorageError as e:
            logging.warning(f"Invoice insert failed: {e}")
            return PersistFailed(message=CREATE_FAILED_MESSAGE)

        logging.debug(f"Created invoice {invoice_id} for {amount_cents} cents dated {to_iso_date(invoice_date)}")
        return self._listing_changed(navigate=True)

    def update(self, invoice_id: str, draft: InvoiceDraft) -> MutationOutcome:
        amount_cents = to_cents(draft.amount)

        try:
            matched = self.store.update_invoice(invoice_id, draft.customer_id, amount_cents, draft.status)
        except StorageError as e:
            if self.strict_update_errors:
                logging.warning(f"Invoice update failed: {e}", extra={"invoice_id": invoice_id})
                return PersistFailed(message=UPDATE_FAILED_MESSAGE)
            # Swallowed: the caller still gets Success and is sent to the listing
            logging.error(f"Invoice update failed: {e}", extra={"invoice_id": invoice_id})
        else:
            if matched == 0:
                logging.info("Update matched no invoice", extra={"invoice_id": invoice_id})

        return self._listing_changed(navigate=True)

    def delete_invoice(self, invoice_id: str) -> MutationOutcome:
        try:
            self.store.delete_invoice(invoice_id)
        except StorageError as e:
            logging.warning(f"Invoice delete failed: {e}", extra={"invoice_id": invoice_id})
            return PersistFailed(message=DELETE_FAILED_MESSAGE)

        # Issued from the listing page, so no navigation
        return self._listing_changed(navigate=False)

    def _listing_changed(self, navigate: bool) -> Success:
        self.revalidator.revalidate_path(self.listing_path)
        return Success(navigate_to=self.listing_path if navigate else None)
