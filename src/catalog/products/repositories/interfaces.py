"""Product repository interface.

Extends ``IRepository[Product]`` with the catalogue look-ups and the
single-field price mutation.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from catalog.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from catalog.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity.

    Point look-ups and mutations raise ``ProductNotFound`` when no row
    matches and ``ProductStoreError`` on any other failure.
    """

    @abstractmethod
    def get_all_products(self) -> List[Product]:
        """Return every product."""

    @abstractmethod
    def get_all_products_by_store(self, store: str) -> List[Product]:
        """Return the products whose ``store`` matches exactly."""

    @abstractmethod
    def add_product(self, product: Product) -> None:
        """Insert a new product; the id is assigned by the database."""

    @abstractmethod
    def update_price(self, id: int, new_price: float) -> None:
        """Overwrite the ``price`` column of an existing product."""
