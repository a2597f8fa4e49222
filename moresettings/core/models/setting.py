"""
Setting model representing one configurable application setting.
"""

import time
from typing import Any

from pydantic import BaseModel, Field


class Setting(BaseModel):
    """
    A single row of the administrative settings grid.

    Attributes:
        id: Primary key
        name: Machine name ("site_title")
        title: Human-readable title; searched through the "label" filter
        value: Current value
        status: Status code (e.g., 1 active, 0 disabled)
        cat_id: Category the setting belongs to
        type: Value type code
        created_at: Creation time as a unix timestamp
        updated_at: Last update as a unix timestamp
        updated_by: Id of the user who last changed the setting
    """

    id: int
    name: str = Field(..., min_length=1, max_length=255)
    title: str = ""
    value: Any = None
    status: int = 1
    cat_id: int | None = None
    type: int | None = None
    created_at: int = Field(default_factory=lambda: int(time.time()))
    updated_at: int | None = None
    updated_by: int | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "site_title",
                "title": "Site title",
                "value": "My site",
                "status": 1,
                "cat_id": 2,
                "type": 1
            }
        }
