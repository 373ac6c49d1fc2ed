from __future__ import annotations

from django.core.management.base import BaseCommand

from catalog.products.models import Product

SEED_PRODUCTS = [
    ("AirFryer", 1000.0, 0.0, "ABC TECH"),
    ("Ütü", 4000.0, 0.0, "ABC TECH"),
]


class Command(BaseCommand):
    help = "Seed the products table with the reference catalogue."

    def add_arguments(self, parser):
        parser.add_argument(
            "--database",
            default="default",
            help="Database alias to seed (default: %(default)s).",
        )

    def handle(self, *args, **options):
        using = options["database"]
        self.stdout.write("Creating products...")

        created = 0
        for name, price, discount, store in SEED_PRODUCTS:
            _, was_created = Product.objects.using(using).get_or_create(
                name=name,
                store=store,
                defaults={"price": price, "discount": discount},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created} created, "
                f"{len(SEED_PRODUCTS) - created} already present"
            )
        )
