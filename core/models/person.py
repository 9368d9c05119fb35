# =============================================================================
# core/models/person.py - Person Schemas
# =============================================================================
# These models define the API contract for person operations:
# - Person: A stored record (id, name, birthDate, createdAt)
# - PersonCreate: Input for creating a person
# - PersonEnvelope, PersonMessageEnvelope, PersonListResponse, ClearResponse:
#   Response bodies
# =============================================================================

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import CamelModel


class Person(CamelModel):
    """
    A tracked individual.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "Ada Lovelace",
            "birthDate": "1815-12-10",
            "createdAt": "2024-01-15T10:30:00+00:00"
        }
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique person identifier, never reused")
    name: str = Field(..., min_length=1, description="Display name")
    birth_date: date = Field(..., description="Calendar date of birth")
    created_at: datetime = Field(..., description="UTC timestamp of creation")


class PersonCreate(CamelModel):
    """
    Schema for POST /api/persons.

    Both fields are optional at the schema level so that a missing or blank
    field is reported as one presence error instead of a pydantic error list.
    Blank strings are normalized to None.

    Example:
        {"name": "Ada Lovelace", "birthDate": "1815-12-10"}
    """

    name: str | None = Field(default=None, examples=["Ada Lovelace"])
    birth_date: date | None = Field(default=None, examples=["1815-12-10"])

    @field_validator("name", "birth_date", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class PersonEnvelope(BaseModel):
    """Response for GET /api/persons/{id}."""
    person: Person


class PersonMessageEnvelope(PersonEnvelope):
    """Response for create and delete: the person plus a status message."""
    message: str


class PersonListResponse(BaseModel):
    """Response for GET /api/persons."""
    count: int = Field(..., ge=0)
    persons: list[Person] = Field(default_factory=list)


class ClearResponse(BaseModel):
    """Response for DELETE /api/persons."""
    message: str
    count: int = Field(..., ge=0)
