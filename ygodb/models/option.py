"""
Option — explicit present/absent values.

Monster attributes are optional on a card. Rather than exposing ``None``
at the model boundary, every optional attribute is returned as an
``Option``.

INVARIANTS:
- A present Option never wraps ``None``
- Options are immutable after construction
- Absent options never invoke the callables passed to ``map``/``for_each``
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ygodb.models.failure import InvalidArgumentError, InvalidStateError

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """
    Zero or one value of type T.

    Build with ``Option.some``, ``Option.none`` or ``Option.of``; the
    constructor itself is internal.
    """

    __slots__ = ("_present", "_value")

    _present: bool
    _value: T | None

    def __init__(self, present: bool, value: T | None = None):
        if present and value is None:
            raise InvalidArgumentError("value", "a present Option cannot wrap None")
        object.__setattr__(self, "_present", present)
        object.__setattr__(self, "_value", value if present else None)

    @classmethod
    def some(cls, value: T) -> "Option[T]":
        """
        Wrap a value.

        Raises:
            InvalidArgumentError: If value is None
        """
        if value is None:
            raise InvalidArgumentError("value", "Option.some() requires a value, got None")
        return cls(True, value)

    @classmethod
    def none(cls) -> "Option[T]":
        """An absent Option."""
        return cls(False)

    @classmethod
    def of(cls, value: T | None) -> "Option[T]":
        """Absent if value is None, present otherwise."""
        if value is None:
            return cls.none()
        return cls.some(value)

    @property
    def is_some(self) -> bool:
        return self._present

    @property
    def is_none(self) -> bool:
        return not self._present

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        """Transform the contained value; absence propagates without calling f."""
        if self._present:
            return Option.some(f(self._value))  # type: ignore[arg-type]
        return Option.none()

    def unwrap(self) -> T:
        """
        Return the contained value.

        Raises:
            InvalidStateError: If the Option is absent
        """
        if not self._present:
            raise InvalidStateError("Cannot unwrap an absent Option")
        return self._value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Return the contained value, or default when absent."""
        if self._present:
            return self._value  # type: ignore[return-value]
        return default

    def for_each(self, action: Callable[[T], Any]) -> None:
        """Invoke action with the contained value, only if present."""
        if self._present:
            action(self._value)  # type: ignore[arg-type]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __bool__(self) -> bool:
        return self._present

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self._present and other._present:
            return bool(self._value == other._value)
        return self._present == other._present

    def __hash__(self) -> int:
        return hash((self._present, self._value))

    def __repr__(self) -> str:
        if self._present:
            return f"Option.some({self._value!r})"
        return "Option.none()"
