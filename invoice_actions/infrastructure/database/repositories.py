"""Data access layer for invoices"""

from datetime import date
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from invoice_actions.infrastructure.database.models import InvoiceRecord
from invoice_actions.domain.exceptions import StorageError
from invoice_actions.domain.models import Invoice, InvoiceStatus


class InvoiceRepository:
    """
    Repository for invoices.

    Every write method issues exactly one statement and commits it. Driver
    errors roll the session back and surface as StorageError.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert_invoice(self, customer_id: str, amount_cents: int, status: InvoiceStatus, invoice_date: date) -> str:
        """Insert a new invoice and return its generated id"""
        db_invoice = InvoiceRecord(
            customer_id=customer_id,
            amount=amount_cents,
            status=status.value,
            date=invoice_date,
        )
        try:
            self.db.add(db_invoice)
            self.db.flush()  # Assigns the id before the session expires it on commit
            invoice_id = db_invoice.id
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("insert", str(e)) from e
        return invoice_id

    def update_invoice(self, invoice_id: str, customer_id: str, amount_cents: int, status: InvoiceStatus) -> int:
        """Overwrite customer, amount and status; returns the number of rows matched"""
        try:
            updated = (
                self.db.query(InvoiceRecord)
                .filter(InvoiceRecord.id == invoice_id)
                .update(
                    {
                        InvoiceRecord.customer_id: customer_id,
                        InvoiceRecord.amount: amount_cents,
                        InvoiceRecord.status: status.value,
                    },
                    synchronize_session=False,
                )
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("update", str(e)) from e
        return updated

    def delete_invoice(self, invoice_id: str) -> int:
        """Delete by id; returns the number of rows removed (0 if already gone)"""
        try:
            deleted = (
                self.db.query(InvoiceRecord)
                .filter(InvoiceRecord.id == invoice_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError("delete", str(e)) from e
        return deleted

    def list_invoices(self, limit: int = 100) -> List[Invoice]:
        """Fetch invoices, newest date first"""
        rows = (
            self.db.query(InvoiceRecord)
            .order_by(InvoiceRecord.date.desc(), InvoiceRecord.id)
            .limit(limit)
            .all()
        )
        return [
            Invoice(
                id=row.id,
                customer_id=row.customer_id,
                amount_cents=row.amount,
                status=InvoiceStatus(row.status),
                date=row.date,
            )
            for row in rows
        ]
