"""Input checks for loans and payments.

The engine assumes well-formed records; everything that creates or loads
one runs these first.
"""

from decimal import Decimal

from loan_ledger.exceptions import ValidationError
from loan_ledger.models.base import Borrower

_ZERO = Decimal(0)


def validate_borrower(borrower: Borrower) -> None:
    """Reject a borrower without a name."""
    if not borrower.name or not borrower.name.strip():
        raise ValidationError("Borrower name is required")


def validate_loan_amounts(principal: Decimal, fixed_interest: Decimal) -> None:
    """Reject a non-positive principal or a negative interest fee."""
    _require_finite(principal, "Principal")
    _require_finite(fixed_interest, "Fixed interest")
    if principal <= _ZERO:
        raise ValidationError(f"Principal must be positive, got {principal}")
    if fixed_interest < _ZERO:
        raise ValidationError(f"Fixed interest cannot be negative, got {fixed_interest}")


def validate_payment_amount(amount: Decimal) -> None:
    """Reject a payment that is not a positive amount."""
    _require_finite(amount, "Payment amount")
    if amount <= _ZERO:
        raise ValidationError(f"Payment amount must be positive, got {amount}")


def _require_finite(value: Decimal, label: str) -> None:
    # NaN would raise InvalidOperation on the comparisons below
    if not value.is_finite():
        raise ValidationError(f"{label} must be a finite number, got {value}")
