"""
In-memory people repository.

Nothing here is persisted; the list lives as long as the owning app.
"""
import threading
from typing import Iterable, List, Optional

from domain.models import Address, Person


def default_people() -> List[Person]:
    return [
        Person(id="1", firstname="Michael", lastname="Leimenmeier",
               address=Address(city="Dortmund", country="Germany")),
        Person(id="2", firstname="Sascha Mario", lastname="Klein",
               address=Address(city="Bochum", country="Germany")),
        Person(id="3", firstname="Taran"),
        Person(id="4", firstname="Anju"),
    ]


class PeopleRepository:
    """Ordered list of people guarded by a lock. No uniqueness on id."""

    def __init__(self, people: Optional[Iterable[Person]] = None) -> None:
        self._lock = threading.Lock()
        self._people: List[Person] = list(people or [])

    def list_people(self) -> List[Person]:
        with self._lock:
            return list(self._people)

    def get_person(self, person_id: str) -> Optional[Person]:
        with self._lock:
            for person in self._people:
                if person.id == person_id:
                    return person
        return None

    def add_person(self, person: Person) -> List[Person]:
        with self._lock:
            self._people.append(person)
            return list(self._people)

    def delete_person(self, person_id: str) -> List[Person]:
        """Remove the first person with ``person_id``; unknown ids are a no-op."""
        with self._lock:
            for index, person in enumerate(self._people):
                if person.id == person_id:
                    del self._people[index]
                    break
            return list(self._people)
