"""
Management command to load the configured dish catalog.
"""

from django.core.management.base import BaseCommand
from django.db import DEFAULT_DB_ALIAS

from inventory.services import seed_dishes


class Command(BaseCommand):
    help = "Create the dishes from KERMESSE_DISHES when the catalog is empty"

    def add_arguments(self, parser):
        parser.add_argument(
            "--database",
            default=DEFAULT_DB_ALIAS,
            help="Database alias to seed",
        )

    def handle(self, *args, **options):
        created = seed_dishes(using=options["database"])

        if not created:
            self.stdout.write(self.style.WARNING("Catalog already has dishes, nothing to do"))
            return

        for dish in created:
            self.stdout.write(f"  {dish.name}: stock {dish.stock}, price {dish.sale_price}")
        self.stdout.write(self.style.SUCCESS(f"Created {len(created)} dishes"))
