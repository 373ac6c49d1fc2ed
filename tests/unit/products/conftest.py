"""Fixtures shared by the product unit tests."""

from __future__ import annotations

from typing import List

import pytest

from catalog.products.exceptions import ProductNotFound
from catalog.products.models import Product
from catalog.products.repositories.interfaces import IProductRepository


class FakeProductRepository(IProductRepository):
    """In-memory repository; ids are assigned sequentially from 1."""

    def __init__(self, initial: List[Product] | None = None) -> None:
        self.products: List[Product] = list(initial or [])

    def get_all_products(self) -> List[Product]:
        return list(self.products)

    def get_all_products_by_store(self, store: str) -> List[Product]:
        return [p for p in self.products if p.store == store]

    def add_product(self, product: Product) -> None:
        product.id = len(self.products) + 1
        self.products.append(product)

    def get_by_id(self, id: int) -> Product:
        for product in self.products:
            if product.id == id:
                return product
        raise ProductNotFound(f"Product not found with id {id}")

    def delete_by_id(self, id: int) -> None:
        self.products.remove(self.get_by_id(id))

    def update_price(self, id: int, new_price: float) -> None:
        self.get_by_id(id).price = new_price


@pytest.fixture()
def seeded_fake_repo() -> FakeProductRepository:
    return FakeProductRepository(
        [
            Product(id=1, name="AirFryer", price=1000.0, discount=0.0, store="ABC TECH"),
            Product(id=2, name="Ütü", price=4000.0, discount=0.0, store="ABC TECH"),
        ]
    )