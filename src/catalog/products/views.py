"""Product API views.

Exposes ``ProductService`` over HTTP using a DRF ViewSet.  Domain
exceptions are caught and translated into status codes; every error body
has the shape ``{"errorDescription": "<message>"}``.
"""

from __future__ import annotations

import math
from typing import Any

from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from catalog.products.exceptions import (
    ProductError,
    ProductNotFound,
    ProductStoreError,
)
from catalog.products.repositories.django_repository import ProductDjangoRepository
from catalog.products.serializers import (
    AddProductRequestSerializer,
    ProductResponseSerializer,
)
from catalog.products.services import ProductService

NEW_PRICE_MISSING_MESSAGE = "newPrice should be sent"
NEW_PRICE_INVALID_MESSAGE = "newPrice should be a number"


def error_response(message: str, status_code: int) -> Response:
    return Response({"errorDescription": message}, status=status_code)


def parse_product_id(pk: str) -> int:
    """Turn the path segment into an id; a non-integer names no product."""
    try:
        return int(pk)
    except ValueError:
        raise ProductNotFound(f"Product not found with id {pk}") from None


def describe_errors(errors: Any) -> str:
    """Flatten DRF serializer errors into a single line."""
    if isinstance(errors, dict):
        return "; ".join(
            f"{field}: {describe_errors(detail)}" for field, detail in errors.items()
        )
    if isinstance(errors, list):
        return " ".join(describe_errors(detail) for detail in errors)
    return str(errors)


class ProductViewSet(GenericViewSet):
    """ViewSet for the product catalogue.

    Does **not** touch the ORM: every call goes through ``ProductService``
    built with ``ProductDjangoRepository`` (DIP).
    """

    serializer_class = ProductResponseSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products[?store=NAME]"""
        store = request.query_params.get("store", "")
        try:
            if store:
                products = self._service.get_all_products_by_store(store)
            else:
                products = self._service.get_all_products()
        except ProductStoreError as exc:
            return error_response(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response(ProductResponseSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}"""
        try:
            product = self._service.get_by_id(parse_product_id(pk))
        except ProductError as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(ProductResponseSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products"""
        try:
            serializer = AddProductRequestSerializer(data=request.data)
        except ParseError as exc:
            return error_response(str(exc.detail), status.HTTP_400_BAD_REQUEST)
        if not serializer.is_valid():
            return error_response(
                describe_errors(serializer.errors), status.HTTP_400_BAD_REQUEST
            )

        try:
            self._service.add(serializer.to_dto())
        except ProductError as exc:
            return error_response(str(exc), status.HTTP_422_UNPROCESSABLE_ENTITY)
        return Response(status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}?newPrice=VALUE"""
        raw_price = request.query_params.get("newPrice", "")
        if not raw_price:
            return error_response(NEW_PRICE_MISSING_MESSAGE, status.HTTP_400_BAD_REQUEST)
        try:
            new_price = float(raw_price)
        except ValueError:
            return error_response(NEW_PRICE_INVALID_MESSAGE, status.HTTP_400_BAD_REQUEST)
        if not math.isfinite(new_price):
            return error_response(NEW_PRICE_INVALID_MESSAGE, status.HTTP_400_BAD_REQUEST)

        try:
            self._service.update_price(parse_product_id(pk), new_price)
        except ProductError as exc:
            return error_response(str(exc), status.HTTP_422_UNPROCESSABLE_ENTITY)
        return Response(status=status.HTTP_201_CREATED)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}"""
        try:
            self._service.delete_by_id(parse_product_id(pk))
        except ProductNotFound as exc:
            return error_response(str(exc), status.HTTP_404_NOT_FOUND)
        except ProductStoreError as exc:
            return error_response(str(exc), status.HTTP_422_UNPROCESSABLE_ENTITY)
        return Response(status=status.HTTP_200_OK)
