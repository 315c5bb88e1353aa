"""Domain-level exceptions raised by repository implementations.

Storage-technology errors (SQLAlchemy, driver errors) never cross the
repository boundary directly; they are re-raised as RepositoryError with the
original exception chained as __cause__.
"""

from __future__ import annotations

from typing import Any


class RepositoryError(Exception):
    """A repository call failed in the backing store."""


class EntityNotFoundError(RepositoryError):
    """An operation required an existing entity and none matched the id."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
