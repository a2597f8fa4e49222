"""
ValidationOutcome model representing a single failed check on a field value.
"""

import re
from typing import Any, Literal

from pydantic import BaseModel, Field

PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


def format_message(template: str, params: dict[str, Any]) -> str:
    """
    Substitute {name} placeholders in a message template.

    Placeholders without a matching parameter are left untouched.

    Examples:
        >>> format_message("{attribute} must be no less than {min}.", {"attribute": "Qty", "min": 5})
        'Qty must be no less than 5.'
    """
    def replace(match: re.Match) -> str:
        key = match.group(1)
        if key in params:
            return str(params[key])
        return match.group(0)

    return PLACEHOLDER_RE.sub(replace, template)


class ValidationOutcome(BaseModel):
    """
    A failed check on a field value.

    Attributes:
        kind: What failed: "invalid_type", "pattern_mismatch",
              "below_minimum" or "above_maximum"
        message: Message template (may contain {attribute}, {min}, {max})
        params: Values for the template placeholders
    """

    kind: Literal["invalid_type", "pattern_mismatch", "below_minimum", "above_maximum"]
    message: str = Field(..., min_length=1)
    params: dict[str, Any] = Field(default_factory=dict)

    def render(self, label: str) -> str:
        """Format the message for display with the given field label."""
        return format_message(self.message, {"attribute": label, **self.params})

    class Config:
        json_schema_extra = {
            "example": {
                "kind": "above_maximum",
                "message": "{attribute} must be no greater than {max}.",
                "params": {"max": 10},
            }
        }
