"""
Monster attribute value types.

Small immutable values describing a monster card: race, attribute,
level, rank, pendulum scale, link markers, attack and defence.

INVARIANTS:
- All values are frozen (immutable after construction)
- Race and Attribute store their label without the display suffix
- Level, Rank and PendulumScale values fit an unsigned byte
- Attack and Defence are either a fixed non-negative integer or VARIABLE
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Self

from ygodb.config import MAX_STAT_BYTE
from ygodb.models.failure import InvalidArgumentError
from ygodb.models.option import Option

RACE_SUFFIX = "族"
ATTRIBUTE_SUFFIX = "属性"
VARIABLE_TOKEN = "?"


def _require_byte(argument: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(argument, f"expected an integer, got {value!r}")
    if not 0 <= value <= MAX_STAT_BYTE:
        raise InvalidArgumentError(argument, f"{value} is outside 0..{MAX_STAT_BYTE}")


@dataclass(frozen=True, slots=True)
class Race:
    """
    Monster race (種族), e.g. ドラゴン族.

    Input may carry the 族 suffix; it is stripped on construction and
    re-appended on display.
    """

    name: str

    def __post_init__(self) -> None:
        normalized = self.name.strip().rstrip(RACE_SUFFIX)
        if not normalized:
            raise InvalidArgumentError("race", f"empty race label {self.name!r}")
        object.__setattr__(self, "name", normalized)

    def __str__(self) -> str:
        return f"{self.name}{RACE_SUFFIX}"


@dataclass(frozen=True, slots=True)
class Attribute:
    """
    Monster attribute (属性), e.g. 光属性.

    Accepts "光", "光属" or "光属性"; stored as "光".
    """

    name: str

    def __post_init__(self) -> None:
        normalized = self.name.strip().replace(ATTRIBUTE_SUFFIX, "").rstrip(ATTRIBUTE_SUFFIX[0])
        if not normalized:
            raise InvalidArgumentError("attribute", f"empty attribute label {self.name!r}")
        object.__setattr__(self, "name", normalized)

    def __str__(self) -> str:
        return f"{self.name}{ATTRIBUTE_SUFFIX}"


@dataclass(frozen=True, slots=True)
class Level:
    value: int

    def __post_init__(self) -> None:
        _require_byte("level", self.value)

    def __str__(self) -> str:
        return f"★{self.value}"


@dataclass(frozen=True, slots=True)
class Rank:
    """Xyz monster rank."""

    value: int

    def __post_init__(self) -> None:
        _require_byte("rank", self.value)

    def __str__(self) -> str:
        return f"★{self.value}"


@dataclass(frozen=True, slots=True)
class PendulumScale:
    """Left (red) and right (blue) pendulum scales. Not cross-validated."""

    red: int
    blue: int

    def __post_init__(self) -> None:
        _require_byte("red", self.red)
        _require_byte("blue", self.blue)

    def __str__(self) -> str:
        return f"ペンデュラムスケール: 赤{self.red}/青{self.blue}"


class LinkDirection(Enum):
    """
    The eight link marker directions, declared in canonical order.

    Values are the display glyphs.
    """

    UP = "上"
    UPPER_RIGHT = "右上"
    RIGHT = "右"
    LOWER_RIGHT = "右下"
    DOWN = "下"
    LOWER_LEFT = "左下"
    LEFT = "左"
    UPPER_LEFT = "左上"

    @property
    def field_name(self) -> str:
        """Name of the matching LinkMarkers flag."""
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class LinkMarkers:
    """
    Link markers of a link monster.

    One flag per compass direction. The link rating is the number of
    active markers.
    """

    up: bool = False
    upper_right: bool = False
    right: bool = False
    lower_right: bool = False
    down: bool = False
    lower_left: bool = False
    left: bool = False
    upper_left: bool = False

    @classmethod
    def from_directions(cls, *directions: LinkDirection) -> "LinkMarkers":
        """Build markers with exactly the given directions active."""
        return cls(**{d.field_name: True for d in directions})

    @property
    def directions(self) -> tuple[LinkDirection, ...]:
        """Active directions in canonical order."""
        return tuple(d for d in LinkDirection if getattr(self, d.field_name))

    @property
    def link_count(self) -> int:
        return len(self.directions)

    def __contains__(self, direction: LinkDirection) -> bool:
        return bool(getattr(self, direction.field_name))

    def __str__(self) -> str:
        markers = [d.value for d in self.directions]
        if not markers:
            return "リンク:0"
        return f"リンク:{len(markers)}/" + "/".join(markers)


@dataclass(frozen=True, slots=True)
class _BattleStatus:
    """
    Shared representation of attack and defence.

    The raw token is either a decimal numeral or "?" (VARIABLE).
    """

    token: str

    LABEL: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if self.token != VARIABLE_TOKEN and not self.token.isdecimal():
            raise InvalidArgumentError(
                type(self).__name__.lower(), f"unrecognized status {self.token!r}"
            )
        if self.token.isdecimal():
            object.__setattr__(self, "token", str(int(self.token)))

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Build a status from its textual form ("2500" or "?").

        Raises:
            InvalidArgumentError: If text is neither a numeral nor "?"
        """
        text = text.strip()
        if text == VARIABLE_TOKEN:
            return cls(VARIABLE_TOKEN)
        return cls(text)

    @classmethod
    def fixed(cls, status: int) -> Self:
        """
        Build a fixed status.

        Raises:
            InvalidArgumentError: If status is negative or not an integer
        """
        if isinstance(status, bool) or not isinstance(status, int):
            raise InvalidArgumentError(cls.__name__.lower(), f"expected an integer, got {status!r}")
        if status < 0:
            raise InvalidArgumentError(cls.__name__.lower(), f"{status} is negative")
        return cls(str(status))

    def status(self) -> Option[int]:
        """The numeric value, absent for VARIABLE."""
        if self.token.isdecimal():
            return Option.some(int(self.token))
        return Option.none()

    def is_fixed_status(self) -> bool:
        return self.token.isdecimal()

    def __str__(self) -> str:
        return f"{self.LABEL} {self.token}"


@dataclass(frozen=True, slots=True)
class Attack(_BattleStatus):
    """Monster ATK. Attack.VARIABLE corresponds to "?" on the card."""

    LABEL: ClassVar[str] = "ATK"
    VARIABLE: ClassVar["Attack"]


@dataclass(frozen=True, slots=True)
class Defence(_BattleStatus):
    """Monster DEF. Defence.VARIABLE corresponds to "?" on the card."""

    LABEL: ClassVar[str] = "DEF"
    VARIABLE: ClassVar["Defence"]


Attack.VARIABLE = Attack(VARIABLE_TOKEN)
Defence.VARIABLE = Defence(VARIABLE_TOKEN)
