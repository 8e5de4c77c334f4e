"""Domain models - pure Python dataclasses representing invoice entities and action outcomes"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Union


class InvoiceStatus(str, Enum):
    """Allowed invoice states"""

    PENDING = "pending"
    PAID = "paid"


@dataclass(frozen=True)
class InvoiceDraft:
    """Validated form input, alive for a single request"""

    customer_id: str
    amount: Decimal  # dollars, always > 0
    status: InvoiceStatus


@dataclass
class Invoice:
    """Persisted invoice row"""

    id: str
    customer_id: str
    amount_cents: int
    status: InvoiceStatus
    date: date


FieldErrors = Dict[str, List[str]]


@dataclass(frozen=True)
class Valid:
    data: InvoiceDraft


@dataclass(frozen=True)
class Invalid:
    field_errors: FieldErrors = field(default_factory=dict)


ValidationResult = Union[Valid, Invalid]


@dataclass(frozen=True)
class Success:
    """Mutation applied; the caller navigates to navigate_to when it is set"""

    navigate_to: Optional[str] = None


@dataclass(frozen=True)
class ValidationFailed:
    errors: FieldErrors
    message: str


@dataclass(frozen=True)
class PersistFailed:
    message: str


MutationOutcome = Union[Success, ValidationFailed, PersistFailed]
