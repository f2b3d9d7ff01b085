#!/usr/bin/env python3
"""Generate a sample loan ledger and print its dashboard.

Loans are written to a JSON file that the ledger store can load back.
Settings default to the environment (see ``LedgerConfig.from_env``) and
can be overridden on the command line.
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

from dateutil.parser import isoparse

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loan_ledger.config import LedgerConfig
from loan_ledger.engine import aggregate, query_loans, timeline
from loan_ledger.generators import LoanGenerator
from loan_ledger.logging import get_logger, setup_logging
from loan_ledger.models import LoanFilter, LoanSort
from loan_ledger.sinks import ConsoleSink, JsonLoanRepository

logger = get_logger(__name__)


def main() -> None:
    """Main entry point."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample loan ledger")
    parser.add_argument(
        "--loans",
        type=int,
        default=config.generator.num_loans,
        help=f"Number of loans (default: {config.generator.num_loans})",
    )
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    parser.add_argument(
        "--output",
        type=Path,
        default=config.storage.data_file,
        help=f"Loan file to write (default: {config.storage.data_file})",
    )
    parser.add_argument(
        "--as-of",
        type=isoparse,
        default=None,
        help="ISO timestamp to generate and report for (default: now)",
    )
    parser.add_argument(
        "--filter",
        choices=[f.value for f in LoanFilter],
        default=LoanFilter.ALL.value,
        help="Status filter for the printed loan list",
    )
    parser.add_argument(
        "--sort",
        choices=[s.value for s in LoanSort],
        default=LoanSort.NEWEST.value,
        help="Sort order for the printed loan list",
    )
    parser.add_argument(
        "--timelines",
        action="store_true",
        help="Also print the timeline of each listed loan",
    )
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)

    as_of = args.as_of or datetime.now()
    generator = LoanGenerator(seed=args.seed, locale=config.generator.locale)
    loans = list(generator.generate_batch(args.loans, as_of))
    logger.info("Generated %d loans as of %s", len(loans), as_of.isoformat())

    repository = JsonLoanRepository(args.output, pretty=config.storage.pretty_json)
    repository.save(loans)
    logger.info("Saved loans to %s", args.output)

    sink = ConsoleSink(pretty=config.storage.pretty_json, max_records=10)
    listed = query_loans(
        loans,
        loan_filter=LoanFilter(args.filter),
        sort_by=LoanSort(args.sort),
        as_of=as_of,
    )
    sink.write_batch("loans", listed)

    if args.timelines:
        for calc in listed[: sink.max_records]:
            sink.write_batch(f"timeline {calc.loan.borrower.name}", timeline(calc.loan, as_of))

    sink.write_dashboard(aggregate(loans, as_of))
    sink.close()


if __name__ == "__main__":
    main()
