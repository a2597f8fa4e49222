"""
SafeValidator - marks attributes as safe for mass assignment without checking them.
"""

from typing import Any

from moresettings.core.models.validation_outcome import ValidationOutcome

from .base_validator import BaseValidator, SubjectProtocol


class SafeValidator(BaseValidator):
    """
    Declares that the listed attributes may be loaded from user input.

    Performs no validation; FormModel.load() uses it to decide which
    attributes to assign.
    """

    def __init__(self, attributes: str | list[str], **parameters: Any):
        super().__init__(attributes, skip_on_empty=False)

    def validate_attribute(self, subject: SubjectProtocol, field_name: str) -> list[ValidationOutcome]:
        return []

    def validate_value(self, value: Any) -> ValidationOutcome | None:
        return None

    @property
    def rule_type(self) -> str:
        return "safe"
