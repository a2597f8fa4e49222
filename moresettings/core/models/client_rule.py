"""
ClientRulePayload model describing a numeric rule for browser-side revalidation.
"""

import json
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ClientRulePayload(BaseModel):
    """
    Serializable description of a number rule for a presentation layer.

    Bounds are always numeric so that a script comparing them against the
    typed input behaves the same as the server-side comparison.

    Attributes:
        pattern: Regular expression source the value must match
        message: Formatted type/pattern message
        min: Lower bound (omitted when unbounded)
        too_small: Formatted message for values below min
        max: Upper bound (omitted when unbounded)
        too_big: Formatted message for values above max
        skip_on_empty: 1 when empty values are not checked
    """

    model_config = ConfigDict(populate_by_name=True)

    pattern: str
    message: str
    min: int | float | None = None
    too_small: str | None = Field(None, alias="tooSmall")
    max: int | float | None = None
    too_big: str | None = Field(None, alias="tooBig")
    skip_on_empty: Literal[1] | None = Field(None, alias="skipOnEmpty")

    def to_dict(self) -> dict:
        """Return the wire shape, omitting unset keys."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
