"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  They are the
contract between the API layer (DRF serializers) and the Service layer.
DTOs are immutable (``frozen=True``).

Business rules (the discount range) are *not* validated here: the
service owns them so that the exact error message is produced in one
place.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CreateProductDTO(BaseModel):
    """Immutable input for product creation.

    Same fields as a ``Product`` minus ``id``, which the store assigns.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: float
    discount: float = 0.0
    store: str
