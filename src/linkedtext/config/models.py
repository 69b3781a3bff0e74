from typing import Literal

from pydantic import BaseModel, Field, field_validator


class LinkedTextConfig(BaseModel):
    recognizers: list[str] = Field(default_factory=lambda: ["markdown_link"])
    overflow: Literal["error", "truncate"] = "error"
    sort_fragments: bool = True
    log_level: Literal["debug", "info", "warn", "error"] = "info"

    @field_validator("recognizers")
    @classmethod
    def validate_recognizers(cls, v: list[str]) -> list[str]:
        if any(not name.strip() for name in v):
            raise ValueError("recognizer names cannot be empty or whitespace")
        return v
