# =============================================================================
# app/routers/persons.py - Person CRUD Endpoints
# =============================================================================
# Translates HTTP requests into PersonStore operations.
# Handlers contain no try/except: failures are raised as exceptions and
# mapped to status codes by the handlers registered in app/main.py.
# =============================================================================

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Path, status

from app.dependencies import StoreDep
from app.exceptions import ValidationError
from core.models.person import (
    ClearResponse,
    PersonCreate,
    PersonEnvelope,
    PersonListResponse,
    PersonMessageEnvelope,
)

logger = logging.getLogger(__name__)

router = APIRouter()

PersonId = Annotated[str, Path(min_length=1, description="Person id")]


# =============================================================================
# Endpoints
# =============================================================================

@router.post(
    "",
    response_model=PersonMessageEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_person(request: PersonCreate, store: StoreDep):
    """
    Add a new person.

    Both `name` and `birthDate` (YYYY-MM-DD) are required. The id and
    createdAt timestamp are assigned by the server.
    """
    if not request.name or not request.birth_date:
        logger.warning(
            f"Invalid request - missing fields: name={request.name!r}, "
            f"birthDate={request.birth_date!r}"
        )
        raise ValidationError("Name and birthDate are required")

    if request.birth_date > date.today():
        logger.warning(f"Invalid request - birthDate in the future: {request.birth_date}")
        raise ValidationError("birthDate cannot be in the future")

    person = store.create(request.name, request.birth_date)

    return PersonMessageEnvelope(
        message="Person added successfully",
        person=person,
    )


@router.get("", response_model=PersonListResponse)
async def list_persons(store: StoreDep):
    """List all persons in the order they were added."""
    persons = store.list()
    logger.info(f"Fetching all persons: {len(persons)}")

    return PersonListResponse(count=len(persons), persons=persons)


@router.get("/{person_id}", response_model=PersonEnvelope)
async def get_person(person_id: PersonId, store: StoreDep):
    """Get one person by id."""
    person = store.get_by_id(person_id)
    logger.info(f"Person fetched: {person.id} ({person.name})")

    return PersonEnvelope(person=person)


@router.delete("/{person_id}", response_model=PersonMessageEnvelope)
async def delete_person(person_id: PersonId, store: StoreDep):
    """Delete one person by id and return the removed record."""
    person = store.delete_by_id(person_id)

    return PersonMessageEnvelope(
        message="Person deleted successfully",
        person=person,
    )


@router.delete("", response_model=ClearResponse)
async def clear_persons(store: StoreDep):
    """Remove every person."""
    count = store.clear()

    return ClearResponse(message=f"Cleared {count} persons", count=count)
