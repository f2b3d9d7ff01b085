"""Tests for custom exception hierarchy."""

from loan_ledger.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    InvalidEntityStateError,
    LoanLedgerError,
    ReferentialIntegrityError,
    StorageError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_loan_ledger_error_is_exception(self) -> None:
        assert isinstance(LoanLedgerError("test"), Exception)

    def test_entity_not_found_is_loan_ledger_error(self) -> None:
        assert isinstance(EntityNotFoundError("test"), LoanLedgerError)

    def test_referential_integrity_is_entity_not_found(self) -> None:
        err = ReferentialIntegrityError("test")
        assert isinstance(err, EntityNotFoundError)
        assert isinstance(err, LoanLedgerError)

    def test_other_errors_are_loan_ledger_errors(self) -> None:
        errors = (InvalidEntityStateError, ValidationError, ConfigurationError, StorageError)
        for exc_type in errors:
            assert isinstance(exc_type("test"), LoanLedgerError)

    def test_exception_message(self) -> None:
        err = ReferentialIntegrityError("Payment pay-001 not found on loan loan-001")
        assert str(err) == "Payment pay-001 not found on loan loan-001"
