from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.products.models import Product

SEED_PRODUCTS = [
    ("Monitor curvo de 49 pulgadas", 300.0),
    ("Mouse inalámbrico", 40.0),
    ("Teclado mecánico", 120.0),
    ("Audífonos con cancelación de ruido", 250.0),
    ("Webcam 4K", 180.0),
]


class Command(BaseCommand):
    help = "Seed database with demo products."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        created = 0
        for name, price in SEED_PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                name=name, defaults={"price": price}
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created}, "
                f"skipped={len(SEED_PRODUCTS) - created}"
            )
        )
