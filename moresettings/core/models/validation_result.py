"""
ValidationResult model representing the outcome of validating a subject (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, List


class ValidationResult(BaseModel):
    """
    Outcome of running every rule against a subject.

    Attributes:
        subject_id: Identifier of the validated subject, when it has one
        passed: Overall validation status
        passed_rules: Rules that succeeded
        failed_rules: Rules that failed with severity "error"
        warnings: Rules that failed with severity "warning"
        skipped_rules: Rules not run because the value was empty
        errors: Formatted error messages per field
    """

    subject_id: str | None = None
    passed: bool
    passed_rules: List[str] = Field(default_factory=list)
    failed_rules: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    skipped_rules: List[str] = Field(default_factory=list)
    errors: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator('failed_rules')
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed=True implies failed_rules is empty."""
        if info.data.get('passed') and len(v) > 0:
            raise ValueError("passed=True but failed_rules is not empty")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "subject_id": "order-42",
                "passed": False,
                "passed_rules": ["price_number"],
                "failed_rules": ["quantity_integer"],
                "warnings": [],
                "skipped_rules": ["discount_number"],
                "errors": {
                    "quantity": ["Quantity must be no greater than 10."]
                }
            }
        }
