"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Dict, Generator, List, Tuple
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from invoice_actions.api.main import create_app
from invoice_actions.api.dependencies import get_page_cache
from invoice_actions.domain.exceptions import StorageError
from invoice_actions.domain.models import Invoice, InvoiceStatus
from invoice_actions.domain.mutations import ValidatedMutationHandler
from invoice_actions.infrastructure.cache import PageCache
from invoice_actions.infrastructure.database.models import Base, CustomerRecord
from invoice_actions.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

FIXED_TODAY = date(2026, 10, 19)
LISTING_PATH = "/dashboard/invoices"


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless asked
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class InMemoryInvoiceStore:
    """Invoice store double that records every statement it is asked to run"""

    def __init__(self):
        self.invoices: Dict[str, Invoice] = {}
        self.statements: List[Tuple] = []
        self.fail_on: set = set()

    def insert_invoice(self, customer_id: str, amount_cents: int, status: InvoiceStatus, invoice_date: date) -> str:
        self.statements.append(("insert", customer_id, amount_cents, status, invoice_date))
        if "insert" in self.fail_on:
            raise StorageError("insert", "connection refused")
        invoice_id = f"inv-{len(self.statements)}"
        self.invoices[invoice_id] = Invoice(invoice_id, customer_id, amount_cents, status, invoice_date)
        return invoice_id

    def update_invoice(self, invoice_id: str, customer_id: str, amount_cents: int, status: InvoiceStatus) -> int:
        self.statements.append(("update", invoice_id, customer_id, amount_cents, status))
        if "update" in self.fail_on:
            raise StorageError("update", "connection refused")
        invoice = self.invoices.get(invoice_id)
        if invoice is None:
            return 0
        invoice.customer_id = customer_id
        invoice.amount_cents = amount_cents
        invoice.status = status
        return 1

    def delete_invoice(self, invoice_id: str) -> int:
        self.statements.append(("delete", invoice_id))
        if "delete" in self.fail_on:
            raise StorageError("delete", "connection refused")
        return 1 if self.invoices.pop(invoice_id, None) else 0


class RecordingRevalidator:
    def __init__(self):
        self.paths: List[str] = []

    def revalidate_path(self, path: str) -> None:
        self.paths.append(path)


@pytest.fixture
def store() -> InMemoryInvoiceStore:
    return InMemoryInvoiceStore()


@pytest.fixture
def revalidator() -> RecordingRevalidator:
    return RecordingRevalidator()


@pytest.fixture
def handler(store: InMemoryInvoiceStore, revalidator: RecordingRevalidator) -> ValidatedMutationHandler:
    """Handler over in-memory collaborators with a fixed clock"""
    return ValidatedMutationHandler(
        store=store,
        revalidator=revalidator,
        listing_path=LISTING_PATH,
        clock=lambda: FIXED_TODAY,
    )


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def customer(db: Session) -> CustomerRecord:
    """A customer invoices can reference"""
    record = CustomerRecord(id="c1", name="Evil Rabbit", email="evil@rabbit.com")
    db.add(record)
    db.commit()
    return record


@pytest.fixture
def page_cache() -> PageCache:
    return PageCache()


@pytest.fixture
def client(db: Session, page_cache: PageCache) -> TestClient:
    """Create FastAPI test client with test database and a fresh page cache"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_page_cache] = lambda: page_cache
    return TestClient(app)
