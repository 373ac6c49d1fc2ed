from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "catalog.products"
    label = "products"
