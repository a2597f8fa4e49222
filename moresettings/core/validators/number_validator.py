"""
NumberValidator - validates that a field value is a number within bounds.

Unlike a plain range check, min and max may be callables that compute the
bound from the subject and field name at validation time:

    def max_quantity(subject, field_name):
        return subject.get_value("stock")

    NumberValidator("quantity", integer_only=True, min=1, max=max_quantity)
"""

import locale
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import Any

from moresettings.core.models.client_rule import ClientRulePayload
from moresettings.core.models.validation_outcome import ValidationOutcome
from moresettings.observability import metrics
from moresettings.observability.logger import get_logger

from .base_validator import BaseValidator, SubjectProtocol
from .bounds import BoundSpec, as_bound

logger = get_logger(__name__)

INTEGER_PATTERN = r"^\s*[+-]?\d+\s*$"
NUMBER_PATTERN = r"^\s*[-+]?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?\s*$"

MESSAGE_INTEGER = "{attribute} must be an integer."
MESSAGE_NUMBER = "{attribute} must be a number."
MESSAGE_TOO_SMALL = "{attribute} must be no less than {min}."
MESSAGE_TOO_BIG = "{attribute} must be no greater than {max}."
MESSAGE_INVALID = "{attribute} is invalid."

INTEGRAL_FLOAT_LIMIT = 1e15


@dataclass(frozen=True)
class ResolvedBounds:
    """Bounds resolved for a single validation call."""

    min: int | float | Decimal | None = None
    max: int | float | Decimal | None = None


def is_not_number(value: Any) -> bool:
    """
    Whether a value can never be interpreted as a number.

    Collections, booleans, and objects that do not define their own string
    conversion are rejected. None is not rejected here; it fails the
    pattern match instead.
    """
    if value is None:
        return False
    if isinstance(value, (bool, complex, bytes, bytearray)):
        return True
    if isinstance(value, (str, Real, Decimal)):
        return False
    if isinstance(value, (Mapping, Iterable)):
        return True
    return type(value).__str__ is object.__str__


def normalize_number(value: Any) -> str:
    """
    Convert a scalar to the string form matched against the number patterns.

    Integral floats below 1e15 render without a fractional part, so 5.0
    becomes "5". The locale decimal separator is replaced with a dot.
    """
    if value is None:
        return ""
    if isinstance(value, Real) and not isinstance(value, (int, float)):
        value = float(value)
    if isinstance(value, float) and value.is_integer() and abs(value) < INTEGRAL_FLOAT_LIMIT:
        value = int(value)
    text = str(value)
    decimal_point = locale.localeconv().get("decimal_point", ".")
    if decimal_point and decimal_point != ".":
        text = text.replace(decimal_point, ".")
    return text


class NumberValidator(BaseValidator):
    """
    Validates that a field value is a number, optionally an integer, within bounds.

    Parameters:
    - integer_only: Only accept integers (default False)
    - min: Lower bound; a number, numeric string, or callable(subject, field_name)
    - max: Upper bound; a number, numeric string, or callable(subject, field_name)
    - message: Message used when the value is not a number
    - too_small: Message used when the value is below min
    - too_big: Message used when the value is above max
    - integer_pattern / number_pattern: Override the matching regular expressions
    - skip_on_empty: Let the host skip empty values (default True)
    """

    def __init__(
        self,
        attributes: str | list[str],
        integer_only: bool = False,
        min: Any = None,
        max: Any = None,
        message: str | None = None,
        too_small: str | None = None,
        too_big: str | None = None,
        integer_pattern: str = INTEGER_PATTERN,
        number_pattern: str = NUMBER_PATTERN,
        skip_on_empty: bool = True,
    ):
        super().__init__(attributes, message=message, skip_on_empty=skip_on_empty)
        self.integer_only = integer_only
        self.min: BoundSpec | None = as_bound(min)
        self.max: BoundSpec | None = as_bound(max)
        self.too_small = too_small
        self.too_big = too_big

        try:
            self.integer_pattern = re.compile(integer_pattern, re.ASCII)
            self.number_pattern = re.compile(number_pattern, re.ASCII)
        except re.error as e:
            raise ValueError(f"Invalid number pattern: {e}")

        self.finalize()

    def finalize(self) -> None:
        """
        Fill in default messages that were not configured.

        Safe to call more than once: configured messages are never replaced.
        """
        if self.message is None:
            self.message = MESSAGE_INTEGER if self.integer_only else MESSAGE_NUMBER
        if self.min is not None and self.too_small is None:
            self.too_small = MESSAGE_TOO_SMALL
        if self.max is not None and self.too_big is None:
            self.too_big = MESSAGE_TOO_BIG

    @property
    def pattern(self) -> re.Pattern:
        return self.integer_pattern if self.integer_only else self.number_pattern

    def resolve_bounds(self, subject: Any, field_name: str) -> ResolvedBounds:
        """
        Resolve min and max for one validation call.

        The configured bounds are left untouched, so the same validator can
        serve many subjects.

        Raises:
            InvalidBoundError: If a bound does not resolve to a number
            Exception: Whatever a deferred bound callable raises
        """
        resolved = {}
        for bound_name in ("min", "max"):
            spec = getattr(self, bound_name)
            if spec is None:
                resolved[bound_name] = None
                continue
            if spec.is_deferred:
                metrics.bound_resolutions_total.labels(bound=bound_name).inc()
            resolved[bound_name] = spec.resolve(subject, field_name, bound_name)
        return ResolvedBounds(**resolved)

    def _check(self, value: Any, bounds: ResolvedBounds, first_only: bool) -> list[ValidationOutcome]:
        """Classify a value and compare it with the bounds."""
        if is_not_number(value):
            message = MESSAGE_INVALID if first_only else self.message
            return [ValidationOutcome(kind="invalid_type", message=message)]

        # The default patterns match every int; str() of a very long int raises
        if not (isinstance(value, int) and self.pattern.pattern in (INTEGER_PATTERN, NUMBER_PATTERN)):
            normalized = normalize_number(value)
            if not self.pattern.match(normalized):
                return [ValidationOutcome(kind="pattern_mismatch", message=self.message)]

        outcomes = []
        if bounds.min is None and bounds.max is None:
            return outcomes

        number = value if isinstance(value, (int, float, Decimal)) else Decimal(normalized.strip())
        if bounds.min is not None and number < bounds.min:
            outcomes.append(ValidationOutcome(
                kind="below_minimum", message=self.too_small, params={"min": bounds.min}
            ))
            if first_only:
                return outcomes
        if bounds.max is not None and number > bounds.max:
            outcomes.append(ValidationOutcome(
                kind="above_maximum", message=self.too_big, params={"max": bounds.max}
            ))
        return outcomes

    def validate_attribute(self, subject: SubjectProtocol, field_name: str) -> list[ValidationOutcome]:
        """
        Validate one field of a subject, reporting every failed check.

        Returns:
            Between zero and two outcomes; zero means the value passed
        """
        bounds = self.resolve_bounds(subject, field_name)
        value = subject.get_value(field_name)

        outcomes = self._check(value, bounds, first_only=False)
        for outcome in outcomes:
            self.report(subject, field_name, outcome)
            metrics.validation_failures_total.labels(
                rule_type=self.rule_type, field_name=field_name, kind=outcome.kind
            ).inc()

        if outcomes:
            logger.debug(
                f"Field '{field_name}' failed number validation",
                extra={"field_name": field_name, "kinds": [o.kind for o in outcomes]},
            )
        return outcomes

    def validate_value(self, value: Any) -> ValidationOutcome | None:
        """
        Validate a value without subject context, returning the first failure.

        Raises:
            ValueError: If min or max is a deferred bound
        """
        for spec in (self.min, self.max):
            if spec is not None and spec.is_deferred:
                raise ValueError("Deferred bounds need a subject; use validate_attribute()")

        outcomes = self._check(value, self.resolve_bounds(None, ""), first_only=True)
        return outcomes[0] if outcomes else None

    def client_options(self, subject: SubjectProtocol, field_name: str) -> ClientRulePayload:
        """
        Describe this rule for browser-side revalidation of one field.

        Messages are formatted with the field label and the resolved bounds.
        """
        bounds = self.resolve_bounds(subject, field_name)
        label = subject.get_label(field_name)

        options: dict[str, Any] = {
            "pattern": self.pattern.pattern,
            "message": self.format_message(self.message, {"attribute": label}),
        }
        if bounds.min is not None:
            options["min"] = _client_number(bounds.min)
            options["too_small"] = self.format_message(
                self.too_small, {"attribute": label, "min": bounds.min}
            )
        if bounds.max is not None:
            options["max"] = _client_number(bounds.max)
            options["too_big"] = self.format_message(
                self.too_big, {"attribute": label, "max": bounds.max}
            )
        if self.skip_on_empty:
            options["skip_on_empty"] = 1

        return ClientRulePayload(**options)

    @property
    def rule_type(self) -> str:
        return "integer" if self.integer_only else "number"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(attributes={self.attributes}, "
            f"integer_only={self.integer_only}, min={self.min}, max={self.max})"
        )


def _client_number(value: int | float | Decimal) -> int | float:
    if isinstance(value, Decimal):
        return float(value)
    return value
