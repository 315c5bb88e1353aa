"""Generic repository base interface.

Repository[T] is the root abstraction for all data-access interfaces in this
domain layer.  Concrete implementations live in src/infrastructure/persistence/
and are wired at the application boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain model type (never an ORM row or DTO); identities are integers
    assigned by the store.
  - Reads are untracked: returned objects are detached domain values, so changes
    reach the store only through an explicit update().
  - Nothing is cached between calls; every read reflects the store at call time.
  - Cancellation is asyncio task cancellation.  asyncio.CancelledError is never
    caught or wrapped by an implementation.
  - get_list() takes Filter values rather than callables; entity-specific queries
    are declared on each specialised interface (Interface Segregation Principle).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .filters import Filter

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract CRUD interface for a domain entity with an integer identity."""

    @abstractmethod
    async def get_by_id(self, id: int) -> T | None:
        """Return the entity with the given primary key, or None if not found."""

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Return every entity in store-native order (no ordering guarantee)."""

    @abstractmethod
    async def get_list(self, *filters: Filter, order_by: str | None = None) -> list[T]:
        """Return the entities matching every filter, evaluated by the store.

        order_by names a field to sort on (ascending; prefix with "-" for
        descending).  Without it the order is store-native.
        """

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Insert a new entity and return it with its store-assigned id populated."""

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Replace the stored entity having entity's id.

        Raises EntityNotFoundError when no entity has that id.
        """

    @abstractmethod
    async def delete(self, id: int) -> None:
        """Remove the entity with the given primary key.  A missing id is a no-op."""
