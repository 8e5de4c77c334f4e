"""Unit tests for invoice form validation"""

import pytest
from decimal import Decimal
from invoice_actions.domain.models import Invalid, InvoiceStatus, Valid
from invoice_actions.domain.validation import validate

VALID_FORM = {"customerId": "c1", "amount": "250", "status": "paid"}


def test_valid_form_produces_draft():
    """Test all three fields coerce into an InvoiceDraft"""
    result = validate(VALID_FORM)

    assert isinstance(result, Valid)
    assert result.data.customer_id == "c1"
    assert result.data.amount == Decimal("250")
    assert result.data.status is InvoiceStatus.PAID


def test_unknown_fields_ignored():
    """Test extra form keys (e.g. hidden inputs) don't affect validation"""
    result = validate({**VALID_FORM, "id": "abc", "$ACTION_ID": "x"})
    assert isinstance(result, Valid)


@pytest.mark.parametrize("customer_id", [None, "", "   "])
def test_missing_customer(customer_id):
    """Test absent or blank customerId is rejected with the customer message"""
    form = {**VALID_FORM, "customerId": customer_id}

    result = validate(form)

    assert isinstance(result, Invalid)
    assert result.field_errors == {"customerId": ["Please select a customer."]}


def test_customer_key_absent():
    form = {"amount": "10", "status": "pending"}
    result = validate(form)
    assert isinstance(result, Invalid)
    assert "customerId" in result.field_errors


@pytest.mark.parametrize("amount", ["0", "0.00", "-5", "-0.01"])
def test_amount_not_positive(amount):
    """Test zero and negative amounts get the greater-than-zero message"""
    result = validate({**VALID_FORM, "amount": amount})

    assert isinstance(result, Invalid)
    assert result.field_errors == {"amount": ["Please enter an amount greater than $0."]}


@pytest.mark.parametrize("amount", ["abc", "12,50", "NaN", "Infinity"])
def test_amount_not_numeric(amount):
    """Test unparseable amounts are rejected on the amount field only"""
    result = validate({**VALID_FORM, "amount": amount})

    assert isinstance(result, Invalid)
    assert list(result.field_errors) == ["amount"]
    assert result.field_errors["amount"]


def test_amount_missing():
    result = validate({"customerId": "c1", "status": "paid"})
    assert isinstance(result, Invalid)
    assert result.field_errors == {"amount": ["Please enter an amount greater than $0."]}


@pytest.mark.parametrize("status", ["overdue", "PAID", "", None])
def test_status_outside_allowed_values(status):
    """Test only exactly 'pending' or 'paid' are accepted"""
    result = validate({**VALID_FORM, "status": status})

    assert isinstance(result, Invalid)
    assert result.field_errors == {"status": ["Please select an invoice status."]}


def test_all_fields_invalid_reported_together():
    """Test every offending field is reported in one pass"""
    result = validate({"customerId": "", "amount": "0", "status": "void"})

    assert isinstance(result, Invalid)
    assert set(result.field_errors) == {"customerId", "amount", "status"}


def test_small_positive_amount_accepted():
    result = validate({**VALID_FORM, "amount": "0.01"})
    assert isinstance(result, Valid)
    assert result.data.amount == Decimal("0.01")


@pytest.mark.parametrize("amount", ["", "   "])
def test_blank_amount_treated_as_missing(amount):
    """Test a blank amount reads the same as an absent one (browsers submit '' for empty inputs)"""
    result = validate({**VALID_FORM, "amount": amount})

    assert isinstance(result, Invalid)
    assert result.field_errors == {"amount": ["Please enter an amount greater than $0."]}


@pytest.mark.parametrize("amount", ["1e30", "12345678901234567890123456789", "1000000000000"])
def test_oversized_amount_rejected(amount):
    """Test amounts beyond the storable range are rejected instead of reaching cents conversion"""
    result = validate({**VALID_FORM, "amount": amount})

    assert isinstance(result, Invalid)
    assert result.field_errors == {"amount": ["Please enter a valid amount."]}


def test_largest_amount_accepted():
    result = validate({**VALID_FORM, "amount": "999999999999.99"})
    assert isinstance(result, Valid)
