"""
Core data models for moresettings.

All models use Pydantic for runtime validation and type safety.
"""

from .client_rule import ClientRulePayload
from .setting import Setting
from .validation_outcome import ValidationOutcome, format_message
from .validation_result import ValidationResult
from .validation_rule import ValidationRule

__all__ = [
    "ClientRulePayload",
    "Setting",
    "ValidationOutcome",
    "ValidationResult",
    "ValidationRule",
    "format_message",
]
