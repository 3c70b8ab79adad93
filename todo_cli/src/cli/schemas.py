from __future__ import annotations

import re
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Zero value of the date type; stands for "no due date supplied".
ABSENT_DUE = date.min

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


# PUBLIC_INTERFACE
class RawItem(BaseModel):
    """
    The todo item exactly as received on the command line.

    Both fields are plain strings. A missing key and an explicit JSON null
    both collapse to an empty string. Unknown keys are ignored.
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "todo": "Practice Go",
                "due": "2020-02-02",
            }
        },
    )

    todo: str = Field(default="", description="What needs doing; an empty string is accepted")
    due: str = Field(default="", description="Optional due date as YYYY-MM-DD; empty when absent")

    @field_validator("todo", "due", mode="before")
    @classmethod
    def null_to_empty(cls, v: Optional[Any]) -> Any:
        """
        Treat JSON null like an omitted key.
        """
        if v is None:
            return ""
        return v

    @field_validator("todo", "due")
    @classmethod
    def replace_lone_surrogates(cls, v: str) -> str:
        """
        Swap unpaired UTF-16 surrogates (e.g. "\\ud800" in the JSON) for
        U+FFFD so the text can always be written out as UTF-8.
        """
        return _LONE_SURROGATE.sub("\ufffd", v)


# PUBLIC_INTERFACE
class ParsedItem(BaseModel):
    """
    A todo item ready for display, with the due date parsed to a calendar date.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "todo": "Practice Go",
                "due": "2020-02-02",
            }
        },
    )

    todo: str = Field(..., description="Task text copied verbatim from the raw item")
    due: date = Field(
        default=ABSENT_DUE,
        description="Due date, or 0001-01-01 when no due date was supplied",
    )

    @property
    def has_due(self) -> bool:
        return self.due != ABSENT_DUE
