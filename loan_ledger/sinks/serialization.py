"""Conversion between loan records and JSON-compatible dicts."""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from dateutil.parser import isoparse

from loan_ledger.exceptions import ValidationError
from loan_ledger.models import Borrower, Loan, Payment
from loan_ledger.models.validation import (
    validate_borrower,
    validate_loan_amounts,
    validate_payment_amount,
)


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization."""
    result = {}
    for key, value in asdict(obj).items():
        result[key] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output.

    Decimals become strings so amounts survive a round trip exactly.
    """
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def payment_from_dict(data: dict[str, Any]) -> Payment:
    """Build a Payment from its serialized form."""
    try:
        payment = Payment(
            payment_id=data["payment_id"],
            loan_id=data["loan_id"],
            amount=_parse_decimal(data["amount"], "amount"),
            date=_parse_datetime(data["date"]),
            created_at=_parse_datetime(data["created_at"]),
            notes=data.get("notes"),
        )
    except KeyError as exc:
        raise ValidationError(f"Payment record missing field {exc.args[0]!r}") from exc

    validate_payment_amount(payment.amount)
    return payment


def loan_from_dict(data: dict[str, Any]) -> Loan:
    """Build a Loan, with its payments, from its serialized form.

    Raises
    ------
    ValidationError
        If a required field is missing, a value cannot be parsed or an
        amount or borrower name is invalid.
    """
    try:
        borrower = data["borrower"]
        closed_at = data.get("closed_at")
        loan = Loan(
            loan_id=data["loan_id"],
            borrower=Borrower(name=borrower["name"], phone=borrower.get("phone")),
            principal=_parse_decimal(data["principal"], "principal"),
            fixed_interest=_parse_decimal(data["fixed_interest"], "fixed_interest"),
            start_date=_parse_datetime(data["start_date"]),
            due_date=_parse_datetime(data["due_date"]),
            created_at=_parse_datetime(data["created_at"]),
            updated_at=_parse_datetime(data["updated_at"]),
            notes=data.get("notes"),
            payments=[payment_from_dict(p) for p in data.get("payments", [])],
            closed_at=_parse_datetime(closed_at) if closed_at else None,
        )
    except KeyError as exc:
        raise ValidationError(f"Loan record missing field {exc.args[0]!r}") from exc

    validate_borrower(loan.borrower)
    validate_loan_amounts(loan.principal, loan.fixed_interest)
    return loan


def _parse_decimal(raw: Any, field_name: str) -> Decimal:
    try:
        return Decimal(str(raw))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid {field_name}: {raw!r}") from exc


def _parse_datetime(raw: Any) -> datetime:
    if isinstance(raw, datetime):
        return raw
    try:
        return isoparse(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid timestamp: {raw!r}") from exc
