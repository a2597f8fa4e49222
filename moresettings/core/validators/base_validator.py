"""
Base validator interface for all validation rules.

Validators never touch the subject directly beyond the capability
interface defined by SubjectProtocol: reading a value, reading a label,
and reporting an error.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

from moresettings.core.models.validation_outcome import ValidationOutcome, format_message


@runtime_checkable
class SubjectProtocol(Protocol):
    """Capabilities a validator needs from the record being validated."""

    def get_value(self, field_name: str) -> Any:
        ...

    def get_label(self, field_name: str) -> str:
        ...

    def add_error(self, field_name: str, message: str, params: dict[str, Any] | None = None) -> None:
        ...


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Subclasses implement validate_value() for free-standing values and may
    override validate_attribute() when the check depends on the subject.
    """

    def __init__(
        self,
        attributes: str | list[str],
        message: str | None = None,
        skip_on_empty: bool = True,
    ):
        """
        Initialize validator.

        Args:
            attributes: Field name or list of field names this rule applies to
            message: Optional error message template overriding the default
            skip_on_empty: Whether the host should skip empty values
        """
        if isinstance(attributes, str):
            attributes = [attributes]
        self.attributes = list(attributes)
        self.message = message
        self.skip_on_empty = skip_on_empty

    @property
    def field_name(self) -> str:
        """First attribute, for single-field rules."""
        return self.attributes[0]

    def validate_attribute(self, subject: SubjectProtocol, field_name: str) -> list[ValidationOutcome]:
        """
        Validate one field of a subject, reporting failures to it.

        Args:
            subject: The record being validated
            field_name: The field to check

        Returns:
            The outcomes reported (empty when the value passed)
        """
        outcome = self.validate_value(subject.get_value(field_name))
        if outcome is None:
            return []
        self.report(subject, field_name, outcome)
        return [outcome]

    @abstractmethod
    def validate_value(self, value: Any) -> ValidationOutcome | None:
        """
        Validate a value without subject context.

        Returns:
            The first failure, or None when the value is valid
        """
        pass

    def validate(self, value: Any) -> tuple[bool, str | None]:
        """
        Validate a free-standing value.

        Returns:
            (True, None) on success, (False, formatted message) otherwise
        """
        outcome = self.validate_value(value)
        if outcome is None:
            return True, None
        return False, outcome.render("the input value")

    def report(self, subject: SubjectProtocol, field_name: str, outcome: ValidationOutcome) -> None:
        subject.add_error(field_name, outcome.message, outcome.params)

    @staticmethod
    def is_empty(value: Any) -> bool:
        """Whether a value counts as empty for skip-on-empty purposes."""
        return value is None or value == "" or value == [] or value == {}

    @staticmethod
    def format_message(template: str, params: dict[str, Any]) -> str:
        return format_message(template, params)

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(attributes={self.attributes})"
