"""
Limit Regulation — per-card deck quotas.

The persisted form groups card names by quota (compact to store and
edit by hand). Lookups need the inverse, so the table derives a
name -> quota index the first time it is queried or extended.

INVARIANTS:
- A name absent from the table is UNLIMITED (3 copies)
- The reverse index is the sole source of truth for lookups
- The index is built at most once, under the table's lock
- add() keeps the grouping and the index consistent
"""

import json
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from threading import Lock
from typing import Any

from pydantic import ValidationError

from ygodb.config import MAX_DECK_COPIES
from ygodb.models.documents import LimitRegulationDocument
from ygodb.models.failure import InvalidArgumentError, RegulationDecodeError

logger = logging.getLogger(__name__)


class LimitRegulation(IntEnum):
    """Maximum copies of a card allowed in a deck."""

    PROHIBITED = 0
    LIMITED = 1
    SEMI_LIMITED = 2
    UNLIMITED = MAX_DECK_COPIES

    @property
    def max_copies(self) -> int:
        return int(self)


# Quotas written to the persisted form; UNLIMITED is implicit.
PERSISTED_REGULATIONS: tuple[LimitRegulation, ...] = (
    LimitRegulation.PROHIBITED,
    LimitRegulation.LIMITED,
    LimitRegulation.SEMI_LIMITED,
)


@dataclass
class LimitRegulationTable:
    """
    Mapping from card name to LimitRegulation.

    Thread-safe: the lazy index build and every mutation happen under
    one lock. Adding the same name twice is a caller error; the grouping
    keeps both entries and the index keeps the latest.
    """

    _groups: dict[LimitRegulation, list[str]] = field(default_factory=dict)
    _index: dict[str, LimitRegulation] | None = field(default=None, repr=False, compare=False)
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def _ensure_index(self) -> dict[str, LimitRegulation]:
        """Build the reverse index if needed. Caller must hold the lock."""
        if self._index is None:
            index: dict[str, LimitRegulation] = {}
            for regulation in sorted(self._groups):
                for name in self._groups[regulation]:
                    index[name] = regulation
            self._index = index
            logger.debug("Built limit regulation index with %d entries", len(index))
        return self._index

    def add(self, name: str, regulation: LimitRegulation) -> None:
        """
        Register name under regulation.

        Raises:
            InvalidArgumentError: If regulation is not a quota 0-3
        """
        try:
            regulation = LimitRegulation(regulation)
        except ValueError:
            raise InvalidArgumentError("regulation", f"unknown quota {regulation!r}") from None
        with self._lock:
            index = self._ensure_index()
            self._groups.setdefault(regulation, []).append(name)
            index[name] = regulation

    def get(self, name: str) -> LimitRegulation:
        """Regulation for name; UNLIMITED when the name is not registered."""
        with self._lock:
            return self._ensure_index().get(name, LimitRegulation.UNLIMITED)

    def max_copies(self, name: str) -> int:
        """Maximum number of copies of name allowed in a deck."""
        return self.get(name).max_copies

    def names(self, regulation: LimitRegulation) -> tuple[str, ...]:
        """Names registered under regulation, in insertion order."""
        with self._lock:
            return tuple(self._groups.get(LimitRegulation(regulation), ()))

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._ensure_index()

    def __len__(self) -> int:
        """Number of distinct registered names."""
        with self._lock:
            return len(self._ensure_index())

    # -------------------------------------------------------------------------
    # JSON
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, list[str]]:
        """Persisted form: {"0": [...], "1": [...], "2": [...]}."""
        with self._lock:
            return {
                str(int(regulation)): list(self._groups.get(regulation, []))
                for regulation in PERSISTED_REGULATIONS
            }

    @classmethod
    def from_dict(cls, data: Any) -> "LimitRegulationTable":
        """
        Decode the persisted form.

        Raises:
            RegulationDecodeError: If keys are not quotas 0-3 or values are not name lists
        """
        try:
            document = LimitRegulationDocument.model_validate(data)
        except ValidationError as e:
            raise RegulationDecodeError("expected an object of quota -> card names", str(e)) from e

        groups: dict[LimitRegulation, list[str]] = {}
        for quota, names in document.root.items():
            try:
                regulation = LimitRegulation(quota)
            except ValueError:
                raise RegulationDecodeError(f"unknown quota {quota}") from None
            groups.setdefault(regulation, []).extend(names)

        return cls(_groups=groups)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str | bytes) -> "LimitRegulationTable":
        """
        Decode the persisted form from JSON text.

        Raises:
            RegulationDecodeError: If the text is malformed or not a regulation document
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RegulationDecodeError(f"malformed JSON ({e.msg})", str(e)) from e
        except UnicodeDecodeError as e:
            raise RegulationDecodeError(f"malformed JSON ({e.reason})", str(e)) from e
        return cls.from_dict(data)
