"""
Catalog module data models.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from shared.models import CamelModel


class Course(CamelModel):
    """A row of the `courses` table."""

    id: str
    title: str
    slug: str
    description: Optional[str] = None
    category: Optional[str] = None
    price: Optional[int] = Field(None, ge=0, description="Price in paise")
    instructor: Optional[str] = None
    duration: Optional[str] = None
    level: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"extra": "ignore"}


class CourseCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    price: Optional[int] = Field(None, ge=0)
    instructor: Optional[str] = None
    duration: Optional[str] = None
    level: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=2048)


class CourseUpdate(CamelModel):
    """Partial update; omitted fields are left unchanged."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    price: Optional[int] = Field(None, ge=0)
    instructor: Optional[str] = None
    duration: Optional[str] = None
    level: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=2048)

    @field_validator("title")
    @classmethod
    def _title_not_null(cls, value: Optional[str]) -> str:
        # Runs only when the field is sent; omitting it keeps the old title.
        if value is None:
            raise ValueError("title cannot be null")
        return value
