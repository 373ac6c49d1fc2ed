"""Product service layer (Use Cases).

Enforces the catalogue's business rules and delegates persistence to the
injected ``IProductRepository``.  Repository exceptions
(``ProductNotFound``, ``ProductStoreError``) pass through unchanged.

Business rules enforced here:
- Discount must stay within ``[0, 75]``; NaN is rejected too.  Checked
  before any store call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from catalog.products.constants import (
    DISCOUNT_INVALID_MESSAGE,
    DISCOUNT_NEGATIVE_MESSAGE,
    DISCOUNT_TOO_HIGH_MESSAGE,
    MAX_DISCOUNT,
    MIN_DISCOUNT,
)
from catalog.products.exceptions import ProductValidationError
from catalog.products.models import Product

if TYPE_CHECKING:
    from catalog.products.dtos import CreateProductDTO
    from catalog.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add(self, dto: CreateProductDTO) -> None:
        """Validate and store a new product.

        Raises:
            ProductValidationError: if the discount is outside ``[0, 75]``.
            ProductStoreError: if the insert fails.
        """
        log = logger.bind(name=dto.name, store=dto.store, discount=dto.discount)

        if not (MIN_DISCOUNT <= dto.discount <= MAX_DISCOUNT):
            if dto.discount > MAX_DISCOUNT:
                log.warning("product.discount_too_high")
                raise ProductValidationError(DISCOUNT_TOO_HIGH_MESSAGE)
            if dto.discount < MIN_DISCOUNT:
                log.warning("product.discount_negative")
                raise ProductValidationError(DISCOUNT_NEGATIVE_MESSAGE)
            log.warning("product.discount_invalid")
            raise ProductValidationError(DISCOUNT_INVALID_MESSAGE)

        product = Product(
            name=dto.name,
            price=dto.price,
            discount=dto.discount,
            store=dto.store,
        )
        self._repo.add_product(product)

    def update_price(self, id: int, new_price: float) -> None:
        self._repo.update_price(id, new_price)

    def delete_by_id(self, id: int) -> None:
        self._repo.delete_by_id(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Product:
        return self._repo.get_by_id(id)

    def get_all_products(self) -> List[Product]:
        return self._repo.get_all_products()

    def get_all_products_by_store(self, store: str) -> List[Product]:
        return self._repo.get_all_products_by_store(store)
