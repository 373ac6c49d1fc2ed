"""Product model mapped onto the ``products`` table.

Schema contract::

    products(id serial primary key, name text, price real,
             discount real, store text)

The model is the single row-to-entity mapping shared by every read path.
It carries no business validation: the discount range is enforced by
``ProductService`` and the database accepts any value.
"""

from __future__ import annotations

from django.db import models


class RealField(models.FloatField):
    """Single-precision float column (``real``) on PostgreSQL.

    Other backends keep Django's default float column type.
    """

    def db_type(self, connection) -> str | None:
        if connection.vendor == "postgresql":
            return "real"
        return super().db_type(connection)


class Product(models.Model):
    """A priced catalogue item sold by a ``store``."""

    id = models.AutoField(primary_key=True)
    name = models.TextField()
    price = RealField()
    discount = RealField()
    store = models.TextField()

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.id} - {self.name} ({self.store})"
