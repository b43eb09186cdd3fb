import logging
from decimal import Decimal

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, transaction

from sales.exceptions import DishNotFound, InvalidSoldCount
from sales.models import SaleLine
from .models import MAX_DISH_ID, Dish

logger = logging.getLogger(__name__)


def parse_dish_id(value):
    """Dish primary key from a URL segment, DishNotFound when it cannot name a stored dish"""
    try:
        dish_id = int(value)
    except (TypeError, ValueError):
        raise DishNotFound()
    if not 0 < dish_id <= MAX_DISH_ID:
        raise DishNotFound()
    return dish_id


def seed_dishes(catalog=None, using=DEFAULT_DB_ALIAS):
    """Create the configured catalog when no dish exists yet; returns the new dishes"""
    if catalog is None:
        catalog = settings.KERMESSE_DISHES

    with transaction.atomic(using=using):
        if Dish.objects.using(using).exists():
            return []
        created = [
            Dish.objects.using(using).create(
                name=dish['name'],
                stock=dish['stock'],
                cost_price=Decimal(str(dish['cost_price'])),
                sale_price=Decimal(str(dish['sale_price'])),
            )
            for dish in catalog
        ]

    logger.info(f"Seeded {len(created)} dishes")
    return created


def correct_units_sold(dish_id, units_sold, using=DEFAULT_DB_ALIAS):
    """
    Overwrite a dish's units sold with an absolute value.

    The dish's ledger lines can no longer be reconciled with the new count,
    so they are deleted in the same transaction. Team attribution for that
    dish is lost.
    """
    with transaction.atomic(using=using):
        try:
            dish = Dish.objects.using(using).select_for_update().get(pk=dish_id)
        except Dish.DoesNotExist:
            raise DishNotFound()

        if units_sold > dish.stock:
            raise InvalidSoldCount(f'La cantidad vendida no puede exceder el stock de {dish.stock}')
        if units_sold < 0:
            raise InvalidSoldCount('La cantidad vendida no puede ser negativa')

        dish.units_sold = units_sold
        dish.save(using=using, update_fields=['units_sold'])
        discarded, _ = SaleLine.objects.using(using).filter(dish=dish).delete()

    if discarded:
        logger.warning(f"Correction of {dish.name} discarded {discarded} ledger lines")
    logger.info(f"Dish {dish.pk} ({dish.name}) set to {units_sold} sold")
    return dish
