"""Custom exception hierarchy for loan-ledger."""


class LoanLedgerError(Exception):
    """Base exception for all loan-ledger errors."""


class EntityNotFoundError(LoanLedgerError):
    """Raised when a referenced loan or payment does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a payment references a loan it does not belong to."""


class InvalidEntityStateError(LoanLedgerError):
    """Raised when a loan is in an invalid state for the operation."""


class ValidationError(LoanLedgerError):
    """Raised when loan or payment input is malformed."""


class ConfigurationError(LoanLedgerError):
    """Raised when configuration is invalid or missing."""


class StorageError(LoanLedgerError):
    """Raised when reading or writing the loan file fails."""
