"""Generic entity repository and its in-memory store."""

from __future__ import annotations

import copy
import logging
import threading
from typing import Generic, Protocol, TypeVar

from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class Identified(Protocol):
    """Anything with an integer identity the repository can assign."""

    id: int | None


EntityT = TypeVar("EntityT", bound=Identified)


class RepositoryError(Exception):
    pass


class EntityNotFoundError(RepositoryError):
    def __init__(self, entity_id: int | None) -> None:
        super().__init__(f"No entity with id {entity_id}")
        self.entity_id = entity_id


class Repository(Protocol[EntityT]):
    def create(self, entity: EntityT) -> EntityT: ...

    def get_all(self) -> list[EntityT]: ...

    def get_by_id(self, entity_id: int) -> EntityT | None: ...

    def update(self, entity: EntityT) -> None: ...

    def count(self) -> int: ...


class InMemoryStore:
    """Owns the stored items, their ID sequences and the lock guarding both.

    Items are kept per kind, keyed by the owning repository's sequence name,
    so repositories for different entity types can share one store. Sequences
    only ever move forward, so an ID is never handed out twice by the same
    store.
    """

    def __init__(self) -> None:
        self.items: dict[str, list] = {}
        self.lock = threading.Lock()
        self._sequences: dict[str, int] = {}

    def next_id(self, sequence: str) -> int:
        value = self._sequences.get(sequence, 0) + 1
        self._sequences[sequence] = value
        return value

    def items_for(self, kind: str) -> list:
        return self.items.setdefault(kind, [])

    def count(self, kind: str) -> int:
        return len(self.items.get(kind, ()))

    def __len__(self) -> int:
        return sum(len(items) for items in self.items.values())


class InMemoryRepository(Generic[EntityT]):
    sequence = "entity"

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def create(self, entity: EntityT) -> EntityT:
        with self.store.lock:
            entity.id = self.store.next_id(self.sequence)
            self._on_create(entity)
            self._items.append(copy.deepcopy(entity))
        logger.debug("Stored %s with id=%s", type(entity).__name__, entity.id)
        return entity

    def get_all(self) -> list[EntityT]:
        with self.store.lock:
            return [copy.deepcopy(item) for item in self._items]

    def get_by_id(self, entity_id: int) -> EntityT | None:
        with self.store.lock:
            index = self._index_of(entity_id)
            if index is None:
                return None
            return copy.deepcopy(self._items[index])

    def update(self, entity: EntityT) -> None:
        with self.store.lock:
            index = self._index_of(entity.id)
            if index is None:
                raise EntityNotFoundError(entity.id)
            self._items[index] = copy.deepcopy(entity)

    def count(self) -> int:
        with self.store.lock:
            return self.store.count(self.sequence)

    @property
    def _items(self) -> list:
        return self.store.items_for(self.sequence)

    def _on_create(self, entity: EntityT) -> None:
        """Hook for entity-specific identity work; runs under the store lock."""

    def _index_of(self, entity_id: int | None) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                return index
        return None


class EmployeeRepository(InMemoryRepository[Employee]):
    sequence = "employee"
    benefit_sequence = "employee_benefit"

    def _on_create(self, entity: Employee) -> None:
        for benefit in entity.benefits:
            benefit.id = self.store.next_id(self.benefit_sequence)
            benefit.employee_id = entity.id
