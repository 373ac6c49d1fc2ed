"""Unit tests for ProductService.

Covers:
- add: discount range rule, conversion to Product, store error pass-through.
- update_price / delete_by_id / get_by_id: pure delegation and error pass-through.
- get_all_products / get_all_products_by_store: delegation.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from catalog.products.dtos import CreateProductDTO
from catalog.products.exceptions import (
    ProductNotFound,
    ProductStoreError,
    ProductValidationError,
)
from catalog.products.models import Product
from catalog.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _dto(**overrides) -> CreateProductDTO:
    defaults = {
        "name": "Ütü",
        "price": 1000.0,
        "discount": 50.0,
        "store": "ABC TECH",
    }
    defaults.update(overrides)
    return CreateProductDTO(**defaults)


# ===========================================================================
# add
# ===========================================================================


class TestAdd:
    def test_converts_dto_to_product_without_id(self, service, mock_repo):
        service.add(_dto())

        mock_repo.add_product.assert_called_once()
        product = mock_repo.add_product.call_args.args[0]
        assert isinstance(product, Product)
        assert product.id is None
        assert product.name == "Ütü"
        assert product.price == 1000.0
        assert product.discount == 50.0
        assert product.store == "ABC TECH"

    @pytest.mark.parametrize("discount", [0, 0.01, 50, 74.99, 75])
    def test_accepts_discount_within_range(self, service, mock_repo, discount):
        service.add(_dto(discount=discount))

        product = mock_repo.add_product.call_args.args[0]
        assert product.discount == discount

    @pytest.mark.parametrize("discount", [75.01, 80, 100, 1000])
    def test_discount_above_limit_raises(self, service, mock_repo, discount):
        with pytest.raises(ProductValidationError) as exc_info:
            service.add(_dto(discount=discount))

        assert str(exc_info.value) == "Product discount can not be higher than 75!"
        mock_repo.add_product.assert_not_called()

    def test_negative_discount_raises(self, service, mock_repo):
        with pytest.raises(ProductValidationError, match="negative"):
            service.add(_dto(discount=-1))

        mock_repo.add_product.assert_not_called()

    @pytest.mark.parametrize("discount", [float("nan"), float("-inf")])
    def test_discount_outside_range_never_reaches_store(
        self, service, mock_repo, discount
    ):
        with pytest.raises(ProductValidationError):
            service.add(_dto(discount=discount))

        mock_repo.add_product.assert_not_called()

    def test_nan_discount_has_own_message(self, service, mock_repo):
        with pytest.raises(ProductValidationError) as exc_info:
            service.add(_dto(discount=float("nan")))

        assert str(exc_info.value) == (
            "Product discount must be a number between 0 and 75!"
        )
        mock_repo.add_product.assert_not_called()

    def test_store_error_propagates_unchanged(self, service, mock_repo):
        error = ProductStoreError("connection refused")
        mock_repo.add_product.side_effect = error

        with pytest.raises(ProductStoreError) as exc_info:
            service.add(_dto())

        assert exc_info.value is error

    def test_returns_none(self, service, mock_repo):
        assert service.add(_dto()) is None


# ===========================================================================
# update_price
# ===========================================================================


class TestUpdatePrice:
    def test_delegates_to_repo(self, service, mock_repo):
        service.update_price(7, 1250.5)

        mock_repo.update_price.assert_called_once_with(7, 1250.5)

    def test_does_not_validate_price(self, service, mock_repo):
        service.update_price(7, -10.0)

        mock_repo.update_price.assert_called_once_with(7, -10.0)

    def test_not_found_propagates(self, service, mock_repo):
        mock_repo.update_price.side_effect = ProductNotFound(
            "Product not found with id 7"
        )

        with pytest.raises(ProductNotFound, match="id 7"):
            service.update_price(7, 10.0)


# ===========================================================================
# delete_by_id
# ===========================================================================


class TestDeleteById:
    def test_delegates_to_repo(self, service, mock_repo):
        service.delete_by_id(3)

        mock_repo.delete_by_id.assert_called_once_with(3)

    def test_not_found_propagates(self, service, mock_repo):
        mock_repo.delete_by_id.side_effect = ProductNotFound(
            "Product not found with id 3"
        )

        with pytest.raises(ProductNotFound):
            service.delete_by_id(3)

    def test_store_error_propagates(self, service, mock_repo):
        mock_repo.delete_by_id.side_effect = ProductStoreError(
            "Error while deleting product by id 3"
        )

        with pytest.raises(ProductStoreError):
            service.delete_by_id(3)


# ===========================================================================
# Queries
# ===========================================================================


class TestGetById:
    def test_returns_repo_product(self, service, mock_repo):
        product = Product(id=1, name="AirFryer", price=1000.0, discount=0, store="X")
        mock_repo.get_by_id.return_value = product

        assert service.get_by_id(1) is product
        mock_repo.get_by_id.assert_called_once_with(1)

    def test_not_found_propagates(self, service, mock_repo):
        mock_repo.get_by_id.side_effect = ProductNotFound("Product not found with id 9")

        with pytest.raises(ProductNotFound):
            service.get_by_id(9)


class TestListProducts:
    def test_get_all_delegates_to_repo(self, service, mock_repo):
        mock_repo.get_all_products.return_value = []

        assert service.get_all_products() == []
        mock_repo.get_all_products.assert_called_once_with()

    def test_get_all_by_store_delegates_to_repo(self, service, mock_repo):
        mock_repo.get_all_products_by_store.return_value = []

        service.get_all_products_by_store("ABC TECH")

        mock_repo.get_all_products_by_store.assert_called_once_with("ABC TECH")
