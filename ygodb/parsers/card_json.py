"""
Card list JSON parser.

A card file is a JSON array of card documents. Decoding a single card is
all-or-nothing (Card.from_dict raises); decoding a list rejects bad
records one by one so that a single broken entry does not take the whole
file down.
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from ygodb.models.card import Card
from ygodb.models.failure import CardDecodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RejectedRecord:
    """A record that failed to decode, with its position in the source list."""

    position: int
    error: CardDecodeError


@dataclass
class ParsedCards:
    """Result of decoding a card list."""

    cards: list[Card] = field(default_factory=list)
    rejected: list[RejectedRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every record decoded."""
        return not self.rejected


def parse_card_records(records: Iterable[Any]) -> ParsedCards:
    """
    Decode already-parsed JSON records into cards.

    Records that fail to decode are logged and collected in
    ``ParsedCards.rejected``; the remaining records are still decoded.
    """
    result = ParsedCards()

    for position, record in enumerate(records):
        try:
            result.cards.append(Card.from_dict(record))
        except CardDecodeError as e:
            logger.warning("Rejected card record #%d: %s", position, e)
            result.rejected.append(RejectedRecord(position=position, error=e))

    return result


def parse_card_list(text: str | bytes) -> ParsedCards:
    """
    Decode a JSON array of card documents.

    Raises:
        CardDecodeError: If the text is not JSON or not an array
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CardDecodeError(f"malformed JSON ({e.msg})", detail=str(e)) from e
    except UnicodeDecodeError as e:
        raise CardDecodeError(f"malformed JSON ({e.reason})", detail=str(e)) from e

    if not isinstance(data, list):
        raise CardDecodeError(f"expected a JSON array of cards, got {type(data).__name__}")

    return parse_card_records(data)


def dump_cards(cards: Iterable[Card], indent: int | None = 2) -> str:
    """Encode cards as a JSON array, keeping the given order."""
    return json.dumps([card.to_dict() for card in cards], ensure_ascii=False, indent=indent)
