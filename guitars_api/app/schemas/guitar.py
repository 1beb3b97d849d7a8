"""
Pydantic schemas for guitars.

A guitar has a single attribute, its ``name``, which doubles as its
identifier.  Responses that list guitars also carry ``link``, the
canonical address a client uses to fetch or delete that entry.
"""

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class Guitar(BaseModel):
    """Schema for a guitar as returned from a create."""

    name: str = Field(..., description="Name of the guitar, also its identifier")


class GuitarCreate(BaseModel):
    """Schema for creating a new guitar.

    ``name`` defaults to an empty string so a body without it still
    parses; the service decides whether the name is acceptable.  The
    length limit comes from the ``name_max_length`` key of the
    validation context, so each application enforces its own settings.
    """

    name: str = Field("", description="Name of the new guitar")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("name")
    @classmethod
    def check_length(cls, v: str, info: ValidationInfo) -> str:
        limit = (info.context or {}).get("name_max_length")
        if limit is not None and len(v) > limit:
            raise ValueError(f"name must be at most {limit} characters")
        return v


class GuitarRead(Guitar):
    """Schema for reading a guitar together with its canonical address."""

    link: str = Field(..., description="Canonical address of the guitar")
