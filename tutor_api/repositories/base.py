"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

ModelT = TypeVar("ModelT")
IdT = TypeVar("IdT")


class Repository(ABC, Generic[ModelT, IdT]):
    """
    Persistence contract for one entity type.

    No pagination, filtering, or sorting: callers get single rows by id or
    the whole table.
    """

    @abstractmethod
    async def save(self, entity: ModelT) -> ModelT:
        """Insert the entity if it has no id, otherwise replace the row with that id."""

    @abstractmethod
    async def find_by_id(self, id: IdT) -> Optional[ModelT]:
        """Return the entity with the given id, or None."""

    @abstractmethod
    async def find_all(self) -> List[ModelT]:
        """Return every stored entity."""

    @abstractmethod
    async def delete_by_id(self, id: IdT) -> None:
        """Delete the entity with the given id. A missing id is not an error."""

    @abstractmethod
    async def exists_by_id(self, id: IdT) -> bool:
        """Check whether an entity with the given id is stored."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored entities."""
