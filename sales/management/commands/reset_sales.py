"""
Management command to wipe the sale ledger before a new event.
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS

from sales.services import reset_sales


class Command(BaseCommand):
    help = "Delete every sale line and set all dishes back to zero units sold"

    def add_arguments(self, parser):
        parser.add_argument(
            "--yes",
            action="store_true",
            help="Confirm the reset; nothing is deleted without it",
        )
        parser.add_argument(
            "--database",
            default=DEFAULT_DB_ALIAS,
            help="Database alias to reset",
        )

    def handle(self, *args, **options):
        if not options["yes"]:
            raise CommandError("This deletes all sales. Re-run with --yes to confirm.")

        deleted = reset_sales(using=options["database"])
        self.stdout.write(self.style.SUCCESS(f"Sales reset, {deleted} ledger lines deleted"))
