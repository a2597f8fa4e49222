"""
FormModel - a validatable record holding attributes, labels and errors.

FormModel implements the subject interface validators rely on
(get_value, get_label, add_error) and runs its rules through a RuleEngine.
"""

import re
from typing import Any, Iterable

from moresettings.core.models import ValidationResult, format_message

from .rule_engine import RuleEngine

WORD_SPLIT_RE = re.compile(r"[_\-\s]+|(?<=[a-z0-9])(?=[A-Z])")


def generate_attribute_label(name: str) -> str:
    """
    Turn a field name into a display label.

    Examples:
        >>> generate_attribute_label("cat_id")
        'Cat Id'
        >>> generate_attribute_label("updatedBy")
        'Updated By'
    """
    words = [word for word in WORD_SPLIT_RE.split(name) if word]
    return " ".join(word[:1].upper() + word[1:] for word in words)


class FormModel:
    """
    A record validated field by field against declared rules.

    Subclasses override rules() and attribute_labels(); plain instances can
    receive them through the constructor.

    Attributes:
        subject_id: Optional identifier echoed into ValidationResult
        last_result: Result of the most recent validate() call
    """

    form_name: str | None = None

    def __init__(
        self,
        attributes: dict[str, Any] | None = None,
        labels: dict[str, str] | None = None,
        rules: list[dict[str, Any]] | None = None,
        subject_id: str | None = None,
    ):
        self._attributes: dict[str, Any] = dict(attributes or {})
        self._labels = dict(labels or {})
        self._rules = list(rules or [])
        self._errors: dict[str, list[str]] = {}
        self._engine: RuleEngine | None = None
        self.subject_id = subject_id
        self.last_result: ValidationResult | None = None

    def rules(self) -> list[dict[str, Any]]:
        return self._rules

    def attribute_labels(self) -> dict[str, str]:
        return self._labels

    def get_form_name(self) -> str:
        """Key under which load() expects this form's parameters."""
        if self.form_name is not None:
            return self.form_name
        return type(self).__name__

    @property
    def engine(self) -> RuleEngine:
        if self._engine is None:
            self._engine = RuleEngine(self.rules())
        return self._engine

    # Subject interface

    def get_value(self, field_name: str) -> Any:
        return self._attributes.get(field_name)

    def get_label(self, field_name: str) -> str:
        return self.attribute_labels().get(field_name) or generate_attribute_label(field_name)

    def add_error(self, field_name: str, message: str, params: dict[str, Any] | None = None) -> None:
        text = format_message(message, {"attribute": self.get_label(field_name), **(params or {})})
        self._errors.setdefault(field_name, []).append(text)

    # Attributes

    def set_value(self, field_name: str, value: Any) -> None:
        self._attributes[field_name] = value

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    def set_attributes(self, values: dict[str, Any], safe_only: bool = True) -> None:
        """
        Assign several attributes at once.

        Args:
            values: Field values keyed by name
            safe_only: Ignore fields that no rule mentions
        """
        allowed = set(self.engine.safe_attributes()) if safe_only else None
        for name, value in values.items():
            if allowed is None or name in allowed:
                self._attributes[name] = value

    def load(self, params: dict[str, Any], form_name: str | None = None) -> bool:
        """
        Populate safe attributes from request parameters.

        Parameters are read from params[form_name] (the class name by
        default); with an empty form name the whole mapping is used.

        Returns:
            Whether anything was loaded
        """
        scope = self.get_form_name() if form_name is None else form_name
        if scope == "":
            if not params:
                return False
            self.set_attributes(params)
            return True
        data = params.get(scope)
        if isinstance(data, dict):
            self.set_attributes(data)
            return True
        return False

    # Validation

    def validate(self, attribute_names: Iterable[str] | None = None, clear_errors: bool = True) -> bool:
        """
        Run every rule against this model.

        Args:
            attribute_names: Only validate these fields (default: all)
            clear_errors: Discard errors from earlier runs first

        Returns:
            True when no rule with severity "error" failed
        """
        if clear_errors:
            self.clear_errors()
        self.last_result = self.engine.validate_subject(self, attribute_names)
        return self.last_result.passed

    @property
    def errors(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}

    def has_errors(self, field_name: str | None = None) -> bool:
        if field_name is None:
            return bool(self._errors)
        return bool(self._errors.get(field_name))

    def first_error(self, field_name: str) -> str | None:
        messages = self._errors.get(field_name)
        return messages[0] if messages else None

    def clear_errors(self, field_name: str | None = None) -> None:
        if field_name is None:
            self._errors.clear()
        else:
            self._errors.pop(field_name, None)
