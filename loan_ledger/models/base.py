"""Value objects shared across loan-ledger models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Borrower:
    """Person a loan was given to.

    Has no identity of its own; two borrowers with the same name and
    phone are the same borrower.
    """

    name: str
    phone: str | None = None
