# =============================================================================
# core/services/person_store.py - In-Memory Person Store
# =============================================================================
# Owns the ordered collection of Person records for one process.
#
# A single PersonStore is created with the application (see app/main.py) and
# handed to route handlers through a FastAPI dependency. Contents live only
# in memory and are lost on restart.
# =============================================================================

import logging
import threading
import uuid
from datetime import date, datetime, timezone

from app.exceptions import PersonNotFoundError
from core.models.person import Person

logger = logging.getLogger(__name__)


class PersonStore:
    """
    Insertion-ordered collection of persons keyed by generated id.

    Every operation runs under one lock, so concurrent create/delete/clear
    calls never observe a partial mutation. Issued ids are remembered for
    the life of the store and are never handed out twice, even after the
    person they named has been deleted.
    """

    def __init__(self):
        # id -> Person; dicts preserve insertion order
        self._persons: dict[str, Person] = {}
        self._issued_ids: set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.count()

    def _new_id(self) -> str:
        """Generate an id that has never been issued by this store."""
        while True:
            person_id = str(uuid.uuid4())
            if person_id not in self._issued_ids:
                self._issued_ids.add(person_id)
                return person_id

    def create(self, name: str, birth_date: date) -> Person:
        """
        Add a new person.

        Inputs are assumed validated by the caller.

        Args:
            name: Non-empty display name
            birth_date: Date of birth

        Returns:
            The stored Person with its generated id and createdAt
        """
        with self._lock:
            person = Person(
                id=self._new_id(),
                name=name,
                birth_date=birth_date,
                created_at=datetime.now(timezone.utc),
            )
            self._persons[person.id] = person

        logger.info(f"Person added: {person.id} ({person.name})")
        return person

    def list(self) -> list[Person]:
        """Return a snapshot of all persons in insertion order."""
        with self._lock:
            return list(self._persons.values())

    def get_by_id(self, person_id: str) -> Person:
        """
        Get a person by ID.

        Raises:
            PersonNotFoundError: If no person has this id
        """
        with self._lock:
            person = self._persons.get(person_id)

        if person is None:
            raise PersonNotFoundError(person_id)
        return person

    def delete_by_id(self, person_id: str) -> Person:
        """
        Remove a person by ID.

        Returns:
            The removed Person

        Raises:
            PersonNotFoundError: If no person has this id
        """
        with self._lock:
            person = self._persons.pop(person_id, None)

        if person is None:
            raise PersonNotFoundError(person_id)

        logger.info(f"Person deleted: {person.id} ({person.name})")
        return person

    def clear(self) -> int:
        """Remove every person. Returns the number removed."""
        with self._lock:
            count = len(self._persons)
            self._persons.clear()

        logger.info(f"All persons cleared: {count}")
        return count

    def count(self) -> int:
        """Number of persons currently stored."""
        with self._lock:
            return len(self._persons)
