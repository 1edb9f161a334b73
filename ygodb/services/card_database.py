"""
Card database service.

Loads card and limit regulation data from JSON files and serves
lookups by card identity name.
"""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from ygodb.config import settings
from ygodb.models.card import Card
from ygodb.models.failure import CardNotFoundError
from ygodb.models.limit_regulation import LimitRegulationTable
from ygodb.models.option import Option
from ygodb.parsers.card_json import RejectedRecord, parse_card_list

logger = logging.getLogger(__name__)


@dataclass
class CardDatabase:
    """
    Cards indexed by identity name.

    Only identity lookup is supported; there is no search.
    """

    cards: dict[str, Card] = field(default_factory=dict)
    rejected: list[RejectedRecord] = field(default_factory=list)

    def get(self, name: str) -> Option[Card]:
        """Card with the given identity name, if loaded."""
        return Option.of(self.cards.get(name))

    def require(self, name: str) -> Card:
        """
        Card with the given identity name.

        Raises:
            CardNotFoundError: If no card has that name
        """
        card = self.cards.get(name)
        if card is None:
            raise CardNotFoundError(name)
        return card

    def sorted_cards(self) -> list[Card]:
        """All cards grouped by highest kind, then alphabetized."""
        return sorted(self.cards.values())

    def __contains__(self, name: object) -> bool:
        return name in self.cards

    def __len__(self) -> int:
        return len(self.cards)


def load_card_database(path: Path | None = None) -> CardDatabase:
    """
    Load a card database from a JSON array of card documents.

    Malformed records are rejected and logged. When two records share an
    identity name the first one wins.

    Args:
        path: Path to JSON file. Defaults to the configured card database path

    Raises:
        FileNotFoundError: If the file doesn't exist
        CardDecodeError: If the file is not a JSON array
    """
    if path is None:
        path = settings.card_database_path

    if not path.exists():
        raise FileNotFoundError(f"Card database not found at {path}")

    parsed = parse_card_list(path.read_bytes())

    db = CardDatabase(rejected=parsed.rejected)
    for card in parsed.cards:
        if card.name in db.cards:
            logger.warning("Duplicate card name %r in %s, keeping first", card.name, path)
            continue
        db.cards[card.name] = card

    logger.info(
        "Loaded %d cards from %s (%d rejected)", len(db.cards), path, len(parsed.rejected)
    )
    return db


def load_limit_regulation(path: Path | None = None) -> LimitRegulationTable:
    """
    Load a limit regulation table from its persisted JSON form.

    Args:
        path: Path to JSON file. Defaults to the configured regulation path

    Raises:
        FileNotFoundError: If the file doesn't exist
        RegulationDecodeError: If the file is not a valid regulation document
    """
    if path is None:
        path = settings.limit_regulation_path

    if not path.exists():
        raise FileNotFoundError(f"Limit regulation not found at {path}")

    table = LimitRegulationTable.from_json(path.read_bytes())
    logger.info("Loaded limit regulation with %d regulated cards from %s", len(table), path)
    return table


@lru_cache(maxsize=1)
def get_card_database() -> CardDatabase:
    """
    Get cached card database from the configured path.

    Raises:
        FileNotFoundError: If database file doesn't exist
    """
    return load_card_database()


@lru_cache(maxsize=1)
def get_limit_regulation() -> LimitRegulationTable:
    """
    Get cached limit regulation from the configured path.

    Raises:
        FileNotFoundError: If regulation file doesn't exist
    """
    return load_limit_regulation()
