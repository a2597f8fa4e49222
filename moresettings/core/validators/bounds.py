"""
Bound specifications for numeric validators.

A bound is either a fixed number or a deferred computation that receives
the subject and the field name at validation time.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any, Callable, Union

INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)


class InvalidBoundError(ValueError):
    """Raised when a bound does not resolve to a number."""

    def __init__(self, bound_name: str, value: Any):
        self.bound_name = bound_name
        self.value = value
        super().__init__(f"Bound '{bound_name}' must be numeric, got {value!r}")


def to_number(value: Any) -> int | float | Decimal:
    """
    Coerce a numeric value or numeric string to a Python number.

    Integer-looking strings become int, other numeric strings float.

    Raises:
        ValueError: If the value cannot be interpreted as a number
        TypeError: If the value has an unsupported type
    """
    if isinstance(value, bool):
        raise TypeError("Booleans are not numbers")
    if isinstance(value, (int, float, Decimal)):
        return value
    if isinstance(value, Real):
        return float(value)
    if isinstance(value, str):
        if not value.isascii():
            raise ValueError(f"Non-ASCII numeric string: {value!r}")
        if INTEGER_RE.match(value):
            return int(value)
        return float(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a number")


@dataclass(frozen=True)
class Fixed:
    """A bound known at configuration time."""

    value: Any

    def resolve(self, subject: Any, field_name: str, bound_name: str = "bound") -> int | float | Decimal:
        try:
            return to_number(self.value)
        except (TypeError, ValueError):
            raise InvalidBoundError(bound_name, self.value) from None

    @property
    def is_deferred(self) -> bool:
        return False


@dataclass(frozen=True)
class Deferred:
    """A bound computed from (subject, field_name) on every validation call."""

    func: Callable[[Any, str], Any]

    def resolve(self, subject: Any, field_name: str, bound_name: str = "bound") -> int | float | Decimal:
        # Errors raised by the callable itself are left to the caller
        result = self.func(subject, field_name)
        try:
            return to_number(result)
        except (TypeError, ValueError):
            raise InvalidBoundError(bound_name, result) from None

    @property
    def is_deferred(self) -> bool:
        return True


BoundSpec = Union[Fixed, Deferred]


def as_bound(value: Any) -> BoundSpec | None:
    """
    Wrap a configured min/max value as a BoundSpec.

    Args:
        value: None, a number, a numeric string, a callable, or a BoundSpec

    Returns:
        The matching BoundSpec, or None when no bound is configured
    """
    if value is None or isinstance(value, (Fixed, Deferred)):
        return value
    if callable(value):
        return Deferred(value)
    return Fixed(value)
