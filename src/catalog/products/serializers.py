"""Product DRF serializers for API input/output.

The serializers operate at the Interface layer (API Views).  Business
logic lives in the Service Layer, which receives the Pydantic DTOs from
``dtos.py``.  ``id`` is intentionally absent from the response shape.
"""

from __future__ import annotations

from rest_framework import serializers

from catalog.products.dtos import CreateProductDTO


class AddProductRequestSerializer(serializers.Serializer):
    """Request body of ``POST /api/v1/products``."""

    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    price = serializers.FloatField()
    discount = serializers.FloatField(default=0.0)
    store = serializers.CharField(allow_blank=True, trim_whitespace=False)

    def to_dto(self) -> CreateProductDTO:
        return CreateProductDTO(**self.validated_data)


class ProductResponseSerializer(serializers.Serializer):
    """Flat product representation returned to clients."""

    name = serializers.CharField()
    price = serializers.FloatField()
    discount = serializers.FloatField()
    store = serializers.CharField()