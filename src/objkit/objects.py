"""Helper functions that can operate on any object.

Typical use inside a value class:

```py
class Point:
    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return equal(self.x, other.x) and equal(self.y, other.y)

    def __hash__(self):
        return hash_code([self.x, self.y])

    def __str__(self):
        return to_string_helper(self).add("x", self.x).add("y", self.y).format()
```

`str(Point(1, None))` then yields ``"Point{x=1, y=null}"``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from typing import TypeVar

from .config import (
    FIELD_SEPARATOR,
    HASH_MULTIPLIER,
    HASH_SEED,
    INNER_TYPE_SEPARATOR,
    NAMESPACE_SEPARATOR,
    NULL_HASH,
    NULL_TEXT,
)
from .preconditions import check_not_null

T = TypeVar("T")

_INT32_MASK = 0xFFFFFFFF
_INT64_MASK = 0xFFFFFFFFFFFFFFFF
_INT32_SIGN = 0x80000000


def equal(a: object | None, b: object | None) -> bool:
    """Determine whether two possibly-``None`` objects are equal.

    Returns:
        ``True`` if ``a`` and ``b`` are both ``None``, or both not ``None`` and
        equal according to ``a == b``; ``False`` in all other situations.

    Note:
        Identical references are equal without invoking ``__eq__``.
    """
    return a is b or (a is not None and b is not None and bool(a == b))


def hash_code(values: Sequence[object | None]) -> int:
    """Generate a hash code for multiple values.

    Uses the conventional array-hash scheme: start at 1 and, for each value,
    multiply by 31 and add the value's hash (0 for ``None``), wrapping to a
    signed 32-bit integer. An empty sequence therefore hashes to 1.

    Warning:
        With a single value the result does not equal that value's own hash.

    Args:
        values: The values to aggregate, in order.

    Returns:
        A signed 32-bit integer.
    """
    result = HASH_SEED
    for value in values:
        result = _to_int32(HASH_MULTIPLIER * result + _element_hash(value))
    return result


def first_non_null(first: T | None, second: T | None) -> T:
    """Return the first of two values that is not ``None``.

    Raises:
        InvalidArgumentError: If both ``first`` and ``second`` are ``None``.
    """
    if first is not None:
        return first
    return check_not_null(second, "both arguments are None", argument="second")


def to_string_helper(subject: object) -> ToStringHelper:
    """Create a `ToStringHelper` for ``subject``.

    Args:
        subject: The object to describe (typically ``self``); only its type
            name is used.

    Raises:
        InvalidArgumentError: If ``subject`` is ``None``.
    """
    return ToStringHelper(subject)


def simple_name(qualified_name: str) -> str:
    """Return the innermost name of a qualified type name.

    The text after the last ``$`` wins; failing that, the text after the last
    ``.``; failing that, the whole name.

    Examples:
        >>> simple_name("com.example.Outer$Inner")
        'Inner'
        >>> simple_name("objkit.objects.ToStringHelper")
        'ToStringHelper'
        >>> simple_name("Outer")
        'Outer'
    """
    start = qualified_name.rfind(INNER_TYPE_SEPARATOR)
    if start == -1:
        start = qualified_name.rfind(NAMESPACE_SEPARATOR)
    return qualified_name[start + 1 :]


class ToStringHelper:
    """Accumulates fields for a ``TypeName{field, ...}`` representation.

    Use `to_string_helper` to create an instance. Not safe for concurrent
    mutation.
    """

    __slots__ = ("_fields", "_subject")

    def __init__(self, subject: object) -> None:
        self._subject = check_not_null(subject, argument="subject")
        self._fields: list[str] = []

    def add(self, name: str, value: object | None) -> ToStringHelper:
        """Add a ``name=value`` pair. A ``None`` value is rendered as ``null``.

        Raises:
            InvalidArgumentError: If ``name`` is ``None``.
        """
        name = check_not_null(name, argument="name")
        return self.add_value(f"{name}={_render(value)}")

    def add_value(self, value: object | None) -> ToStringHelper:
        """Add a bare value. Prefer `add` so the value gets a readable name."""
        self._fields.append(_render(value))
        return self

    def format(self) -> str:
        """Return the formatted string."""
        cls = type(self._subject)
        name = simple_name(f"{cls.__module__}{NAMESPACE_SEPARATOR}{cls.__qualname__}")
        return f"{name}{{{FIELD_SEPARATOR.join(self._fields)}}}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"<ToStringHelper {self.format()}>"


def _render(value: object | None) -> str:
    return NULL_TEXT if value is None else str(value)


def _element_hash(value: object | None) -> int:
    if value is None:
        return NULL_HASH
    if isinstance(value, (bytearray, memoryview)):
        # equal to bytes; a writable memoryview refuses hash()
        return _fold(hash(bytes(value)))
    try:
        return _fold(hash(value))
    except TypeError:
        # unhashable containers: hash by content so equal containers agree
        if isinstance(value, Mapping):
            return _to_int32(
                sum(_element_hash(k) ^ _element_hash(v) for k, v in value.items())
            )
        if isinstance(value, Set):
            return _set_hash(value)
        if isinstance(value, Sequence):
            return hash_code(value)
        raise


def _set_hash(value: Set[object]) -> int:
    # sets and dict views compare equal to frozensets
    try:
        return _fold(hash(frozenset(value)))
    except TypeError:
        return _to_int32(sum(_element_hash(item) for item in value))


def _fold(value: int) -> int:
    value &= _INT64_MASK
    return _to_int32(value ^ (value >> 32))


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value
