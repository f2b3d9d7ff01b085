"""JSON file repository for the loan collection."""

import json
import os
import tempfile
from pathlib import Path
from typing import Iterable

from loan_ledger.exceptions import StorageError, ValidationError
from loan_ledger.logging import get_logger
from loan_ledger.models import Loan
from loan_ledger.sinks.serialization import loan_from_dict, to_dict

logger = get_logger(__name__)


class JsonLoanRepository:
    """Read and write all loans as a single JSON document."""

    def __init__(self, path: str | Path, pretty: bool = False) -> None:
        """Initialize JSON loan repository.

        Parameters
        ----------
        path : str | Path
            File holding the loans. Created on first save.
        pretty : bool
            Pretty-print JSON output.
        """
        self.path = Path(path)
        self.pretty = pretty

    def load(self) -> list[Loan]:
        """Read every loan from the file.

        A missing file is an empty ledger.

        Raises
        ------
        StorageError
            If the file cannot be read, is not a list of loan records or
            holds a record with invalid values.
        """
        if not self.path.exists():
            logger.info("No loan file, starting empty", extra={"path": str(self.path)})
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Failed to read loans from {self.path}: {exc}") from exc

        if not isinstance(data, list):
            raise StorageError(f"Expected a list of loans in {self.path}")

        try:
            loans = [loan_from_dict(record) for record in data]
        except ValidationError as exc:
            raise StorageError(f"Invalid loan record in {self.path}: {exc}") from exc

        logger.info("Loaded loans", extra={"path": str(self.path), "count": len(loans)})
        return loans

    def save(self, loans: Iterable[Loan]) -> None:
        """Write every loan to the file, replacing it atomically.

        Raises
        ------
        StorageError
            If the file cannot be written.
        """
        data = [to_dict(loan) for loan in loans]
        tmp_name: str | None = None

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2 if self.pretty else None, ensure_ascii=False)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            raise StorageError(f"Failed to write loans to {self.path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        logger.debug("Saved loans", extra={"path": str(self.path), "count": len(data)})
