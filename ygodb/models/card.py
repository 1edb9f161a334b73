"""
Card — the aggregate describing one card.

INVARIANTS:
- The identity name is the sole equality and hash key
- A card has at least one CardKind
- A card with no monster kind carries no monster attribute
- Cards are immutable after construction
- Monster attributes are exposed as Option, never as None
"""

import json
from collections.abc import Callable, Iterable
from functools import total_ordering
from typing import Any

from pydantic import ValidationError

from ygodb.models.card_kind import CardKind
from ygodb.models.documents import CardDocument, LinkDocument, PendulumScaleDocument
from ygodb.models.failure import CardDecodeError, InvalidArgumentError
from ygodb.models.monster import (
    Attack,
    Attribute,
    Defence,
    Level,
    LinkMarkers,
    PendulumScale,
    Race,
    Rank,
)
from ygodb.models.option import Option

SUMMARY_SEPARATOR = " / "


@total_ordering
class Card:
    """
    Structured attributes of a single card.

    Which monster attributes are populated depends on the card's kinds
    (level for most monsters, rank for xyz, link markers for link
    monsters, pendulum scale for pendulum monsters). Beyond rejecting
    monster attributes on non-monster cards, that pairing is the caller's
    responsibility.

    Ordering groups cards by their highest-ranked kind, then by name.
    """

    __slots__ = (
        "_name",
        "_pronunciation",
        "_description",
        "_kinds",
        "_race",
        "_attribute",
        "_level",
        "_rank",
        "_pendulum_scale",
        "_link",
        "_attack",
        "_defence",
    )

    def __init__(
        self,
        name: str,
        pronunciation: str,
        description: str,
        kinds: Iterable[CardKind],
        race: Race | None = None,
        attribute: Attribute | None = None,
        level: Level | None = None,
        rank: Rank | None = None,
        pendulum_scale: PendulumScale | None = None,
        link: LinkMarkers | None = None,
        attack: Attack | None = None,
        defence: Defence | None = None,
    ):
        kinds = tuple(kinds)
        if not kinds:
            raise InvalidArgumentError("kinds", f"card '{name}' needs at least one kind")

        monster_attributes = (race, attribute, level, rank, pendulum_scale, link, attack, defence)
        if not any(k.is_monster for k in kinds) and any(
            a is not None for a in monster_attributes
        ):
            raise InvalidArgumentError(
                "kinds", f"card '{name}' has monster attributes but no monster kind"
            )

        self._name = name
        self._pronunciation = pronunciation
        self._description = description
        self._kinds = kinds
        self._race = race
        self._attribute = attribute
        self._level = level
        self._rank = rank
        self._pendulum_scale = pendulum_scale
        self._link = link
        self._attack = attack
        self._defence = defence

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Identity name, unique per card."""
        return self._name

    @property
    def pronunciation(self) -> str:
        return self._pronunciation

    @property
    def description(self) -> str:
        """Effect or flavour text."""
        return self._description

    @property
    def kinds(self) -> tuple[CardKind, ...]:
        """Kinds in the order they were given."""
        return self._kinds

    @property
    def race(self) -> Option[Race]:
        return Option.of(self._race)

    @property
    def attribute(self) -> Option[Attribute]:
        return Option.of(self._attribute)

    @property
    def level(self) -> Option[Level]:
        return Option.of(self._level)

    @property
    def rank(self) -> Option[Rank]:
        return Option.of(self._rank)

    @property
    def pendulum_scale(self) -> Option[PendulumScale]:
        return Option.of(self._pendulum_scale)

    @property
    def link(self) -> Option[LinkMarkers]:
        return Option.of(self._link)

    @property
    def attack(self) -> Option[Attack]:
        return Option.of(self._attack)

    @property
    def defence(self) -> Option[Defence]:
        return Option.of(self._defence)

    @property
    def max_kind(self) -> CardKind:
        """Highest-ranked kind; the sort group of this card."""
        return max(self._kinds)

    @property
    def is_monster(self) -> bool:
        return any(k.is_monster for k in self._kinds)

    @property
    def is_extra(self) -> bool:
        return any(k.is_extra for k in self._kinds)

    @property
    def is_spell(self) -> bool:
        return any(k.is_spell for k in self._kinds)

    @property
    def is_trap(self) -> bool:
        return any(k.is_trap for k in self._kinds)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format_summary(self) -> str:
        """
        Human-readable one-line summary.

        Example:
            "青眼の白龍 (ブルーアイズ・ホワイト・ドラゴン) 通常 / 光属性 / ドラゴン族 / ★8 / ATK 3000 / DEF 2500"
        """
        parts = [str(k) for k in self._kinds]

        def append(value: object) -> None:
            parts.append(str(value))

        self.attribute.for_each(append)
        self.race.for_each(append)
        self.level.for_each(append)
        self.rank.for_each(append)
        self.pendulum_scale.for_each(append)
        self.link.for_each(append)
        self.attack.for_each(append)
        self.defence.for_each(append)

        return f"{self._name} ({self._pronunciation}) " + SUMMARY_SEPARATOR.join(parts)

    # -------------------------------------------------------------------------
    # Identity and ordering
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        mine, theirs = self.max_kind, other.max_kind
        if mine != theirs:
            return mine < theirs
        return self._name < other._name

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_defence"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        kinds = ", ".join(str(k) for k in self._kinds)
        return f"Card(name={self._name!r}, kinds=[{kinds}])"

    # -------------------------------------------------------------------------
    # JSON
    # -------------------------------------------------------------------------

    def to_document(self) -> CardDocument:
        return CardDocument(
            name=self._name,
            pronunciation=self._pronunciation,
            description=self._description,
            kinds=list(self._kinds),
            race=self._race.name if self._race is not None else None,
            attribute=self._attribute.name if self._attribute is not None else None,
            level=self._level.value if self._level is not None else None,
            rank=self._rank.value if self._rank is not None else None,
            pendulum_scale=(
                PendulumScaleDocument(red=self._pendulum_scale.red, blue=self._pendulum_scale.blue)
                if self._pendulum_scale is not None
                else None
            ),
            link=(
                LinkDocument(**{d.field_name: True for d in self._link.directions})
                if self._link is not None
                else None
            ),
            attack=_status_to_json(self._attack) if self._attack is not None else None,
            defence=_status_to_json(self._defence) if self._defence is not None else None,
        )

    @classmethod
    def from_document(cls, document: CardDocument) -> "Card":
        """
        Build a card from a validated document.

        Raises:
            CardDecodeError: If a monster attribute value is invalid
        """
        try:
            return cls(
                name=document.name,
                pronunciation=document.pronunciation,
                description=document.description,
                kinds=document.kinds,
                race=_optional(document.race, Race),
                attribute=_optional(document.attribute, Attribute),
                level=_optional(document.level, Level),
                rank=_optional(document.rank, Rank),
                pendulum_scale=_optional(
                    document.pendulum_scale, lambda s: PendulumScale(red=s.red, blue=s.blue)
                ),
                link=_optional(document.link, lambda lk: LinkMarkers(**lk.model_dump())),
                attack=_optional(document.attack, lambda v: _status_from_json(Attack, v)),
                defence=_optional(document.defence, lambda v: _status_from_json(Defence, v)),
            )
        except InvalidArgumentError as e:
            raise CardDecodeError(e.message, card_name=document.name) from e

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict; absent monster attributes are omitted."""
        return self.to_document().to_json_dict()

    @classmethod
    def from_dict(cls, data: Any) -> "Card":
        """
        Decode a card from a parsed JSON value.

        Raises:
            CardDecodeError: If the value is not a valid card document
        """
        try:
            document = CardDocument.model_validate(data)
        except ValidationError as e:
            name = data.get("name") if isinstance(data, dict) else None
            raise CardDecodeError(
                _summarize(e), card_name=name if isinstance(name, str) else None, detail=str(e)
            ) from e
        return cls.from_document(document)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str | bytes) -> "Card":
        """
        Decode a card from JSON text.

        Raises:
            CardDecodeError: If the text is malformed or not a valid card document
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CardDecodeError(f"malformed JSON ({e.msg})", detail=str(e)) from e
        except UnicodeDecodeError as e:
            raise CardDecodeError(f"malformed JSON ({e.reason})", detail=str(e)) from e
        return cls.from_dict(data)


def _optional(value: Any, build: Callable[[Any], Any]) -> Any:
    return None if value is None else build(value)


def _status_to_json(status: Attack | Defence) -> int | str:
    if status.is_fixed_status():
        return status.status().unwrap()
    return status.token


def _status_from_json(cls: type[Attack] | type[Defence], value: int | str) -> Attack | Defence:
    if isinstance(value, int):
        return cls.fixed(value)
    return cls.parse(value)


def _summarize(error: ValidationError) -> str:
    """First validation problem as "field: message"."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "document"
    return f"{location}: {first['msg']}"
