# File: bobo_site/schemas/project.py

from datetime import datetime
from typing import Any, Mapping, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from bobo_site.core.exceptions import ValidationError
from bobo_site.models.project import CATEGORIES, FILM

# Every column a caller may set; id, poster_local and timestamps are server-owned
EDITABLE_FIELDS = (
    "title",
    "year",
    "category",
    "poster_url",
    "dop",
    "bobo_crew",
    "imdb_url",
    "tmdb_url",
    "trailer_url",
    "production_company",
    "synopsis",
)


class ProjectFields(BaseModel):
    """
    Caller-supplied values for create / update.

    Anything not sent ends up as None: updates replace every field.
    """

    title: Optional[str] = None
    year: Optional[int] = Field(None, ge=0, le=9999)
    category: str = FILM
    poster_url: Optional[str] = None
    dop: Optional[str] = None
    bobo_crew: Optional[str] = None
    imdb_url: Optional[str] = None
    tmdb_url: Optional[str] = None
    trailer_url: Optional[str] = None
    production_company: Optional[str] = None
    synopsis: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
        if not v:
            return FILM
        if v not in CATEGORIES:
            raise ValueError(f"category must be one of: {', '.join(CATEGORIES)}")
        return v

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "ProjectFields":
        """
        Build from multipart form values, turning pydantic errors into
        our ValidationError so the API answers 400.
        """
        try:
            return cls(**{k: data.get(k) for k in EDITABLE_FIELDS})
        except pydantic.ValidationError as exc:
            first = exc.errors()[0]
            field = str(first["loc"][0]) if first.get("loc") else None
            raise ValidationError(f"Invalid value for {field}: {first['msg']}", field=field)


class ProjectRead(BaseModel):
    id: int
    title: str
    year: Optional[int] = None
    category: str
    poster_url: Optional[str] = None
    poster_local: Optional[str] = None
    dop: Optional[str] = None
    bobo_crew: Optional[str] = None
    imdb_url: Optional[str] = None
    tmdb_url: Optional[str] = None
    trailer_url: Optional[str] = None
    production_company: Optional[str] = None
    synopsis: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
