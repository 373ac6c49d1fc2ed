"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API against an
injected database alias.  The alias names a pooled connection (psycopg
pool on PostgreSQL); every call borrows it only for the statement it runs.

Error handling:

- A missing row becomes ``ProductNotFound``.
- Any ``DatabaseError`` becomes ``ProductStoreError``, chained to the
  driver exception.
- Bulk reads degrade to an empty list on failure unless the repository
  is built with ``swallow_read_errors=False``.

Price updates and deletes are single conditional statements whose
affected-row count doubles as the existence check.
"""

from __future__ import annotations

from typing import Any, List, Optional

import structlog
from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, DatabaseError
from django.db.models import QuerySet

from catalog.products.exceptions import ProductNotFound, ProductStoreError
from catalog.products.models import Product
from catalog.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def __init__(
        self,
        using: str = DEFAULT_DB_ALIAS,
        swallow_read_errors: Optional[bool] = None,
    ) -> None:
        self._using = using
        if swallow_read_errors is None:
            swallow_read_errors = settings.PRODUCTS_SWALLOW_READ_ERRORS
        self._swallow_read_errors = swallow_read_errors

    def _products(self) -> QuerySet:
        return Product.objects.using(self._using)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_all_products(self) -> List[Product]:
        return self._fetch(self._products().all())

    def get_all_products_by_store(self, store: str) -> List[Product]:
        return self._fetch(self._products().filter(store=store), store=store)

    def _fetch(self, queryset: QuerySet, **context: Any) -> List[Product]:
        try:
            return list(queryset.order_by("id"))
        except DatabaseError as exc:
            logger.error("product.list_failed", error=str(exc), **context)
            if self._swallow_read_errors:
                return []
            raise ProductStoreError("Error while getting products") from exc

    def get_by_id(self, id: int) -> Product:
        """Retrieve a product by primary key.

        Raises:
            ProductNotFound: if no row has this id.
            ProductStoreError: on any other database failure.
        """
        try:
            return self._products().get(id=id)
        except Product.DoesNotExist:
            raise ProductNotFound(f"Product not found with id {id}") from None
        except DatabaseError as exc:
            logger.error("product.get_failed", product_id=id, error=str(exc))
            raise ProductStoreError(
                f"Error while getting product by id {id}"
            ) from exc

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Insert ``product`` as a new row.

        The driver's message is kept as-is in the raised ``ProductStoreError``.
        """
        log = logger.bind(name=product.name, store=product.store)
        try:
            product.save(using=self._using, force_insert=True)
        except DatabaseError as exc:
            log.error("product.add_failed", error=str(exc))
            raise ProductStoreError(str(exc)) from exc
        log.info("product.added", product_id=product.id)

    def delete_by_id(self, id: int) -> None:
        try:
            deleted, _ = self._products().filter(id=id).delete()
        except DatabaseError as exc:
            logger.error("product.delete_failed", product_id=id, error=str(exc))
            raise ProductStoreError(
                f"Error while deleting product by id {id}"
            ) from exc
        if not deleted:
            raise ProductNotFound(f"Product not found with id {id}")
        logger.info("product.deleted", product_id=id)

    def update_price(self, id: int, new_price: float) -> None:
        log = logger.bind(product_id=id, new_price=new_price)
        try:
            updated = self._products().filter(id=id).update(price=new_price)
        except DatabaseError as exc:
            log.error("product.price_update_failed", error=str(exc))
            raise ProductStoreError(
                f"Error while updating product price by id {id}"
            ) from exc
        if not updated:
            raise ProductNotFound(f"Product not found with id {id}")
        log.info("product.price_updated")
