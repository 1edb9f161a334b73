"""
Check card data files.

Loads the configured card database and limit regulation and reports
rejected records and regulated names that no card in the database uses.
"""

import logging
import sys

from ygodb.config import settings
from ygodb.models.failure import KnownError
from ygodb.models.limit_regulation import PERSISTED_REGULATIONS, LimitRegulationTable
from ygodb.services.card_database import CardDatabase, load_card_database, load_limit_regulation

logger = logging.getLogger(__name__)


def find_unknown_regulated_names(db: CardDatabase, table: LimitRegulationTable) -> list[str]:
    """Regulated names with no matching card, in persisted order."""
    unknown: list[str] = []
    for regulation in PERSISTED_REGULATIONS:
        for name in table.names(regulation):
            if name not in db and name not in unknown:
                unknown.append(name)
    return unknown


def run_check() -> int:
    """
    Load both data files and log problems.

    Returns:
        Number of problems found (rejected records + unknown names)
    """
    try:
        db = load_card_database()
        table = load_limit_regulation()
    except (FileNotFoundError, KnownError) as e:
        logger.error("Failed to load card data: %s", e)
        raise

    for record in db.rejected:
        logger.warning("Record #%d rejected: %s", record.position, record.error)

    unknown = find_unknown_regulated_names(db, table)
    for name in unknown:
        logger.warning(
            "Regulated card %r is not in the card database (%s)", name, table.get(name).name
        )

    problems = len(db.rejected) + len(unknown)
    logger.info(
        "Checked %d cards and %d regulated names: %d problems",
        len(db),
        len(table),
        problems,
    )
    return problems


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    problems = run_check()
    sys.exit(1 if problems else 0)


if __name__ == "__main__":
    main()
