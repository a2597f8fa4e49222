"""
ValidationRule model representing a configurable constraint on a form field.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ValidationRule(BaseModel):
    """
    A configurable constraint applied to a subject's field.

    Attributes:
        rule_name: Human-readable name ("quantity_integer")
        rule_type: Type: "number", "integer" or "safe"
        field_name: Which field this rule applies to
        parameters: Rule-specific params (e.g., {"min": 0, "max": 100});
                    min/max may also be callables(subject, field_name)
        enabled: Whether rule is active
        severity: "error" (fails the subject) or "warning" (reported only)
    """

    rule_name: str = Field(..., min_length=1)
    rule_type: Literal["number", "integer", "safe"]
    field_name: str = Field(..., min_length=1)
    parameters: dict[str, Any] | None = None
    enabled: bool = True
    severity: Literal["error", "warning"] = "error"

    class Config:
        json_schema_extra = {
            "example": {
                "rule_name": "quantity_integer",
                "rule_type": "integer",
                "field_name": "quantity",
                "parameters": {"min": 1, "max": 100},
                "enabled": True,
                "severity": "error"
            }
        }
