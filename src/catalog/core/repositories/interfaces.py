"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that every
domain-specific repository interface extends.  Service-layer code
depends on this abstraction, never on the Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).  Entities are keyed by an integer
    primary key assigned by the database.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> T:
        """Retrieve an entity by its primary key.

        Implementations raise a domain-specific "not found" exception
        instead of returning ``None``.
        """

    @abstractmethod
    def delete_by_id(self, id: int) -> None:
        """Physically remove an entity by its primary key."""
