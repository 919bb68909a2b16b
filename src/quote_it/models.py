"""
Quote model for quote-it.

A quote is immutable once stored.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Quote(BaseModel):
    """Schema for a stored quote."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1, description="The quote body")
    author: str | None = Field(default=None, description="Who said it")
    timestamp: datetime | None = Field(default=None, description="When it was recorded")
    id: int | None = Field(default=None, ge=1, description="Position in the store, assigned on append")

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("quote text must not be blank")
        return value
