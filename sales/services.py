"""
Sale registration, reset and per-team reporting.

Every function takes the database alias it works against; writes run inside
``transaction.atomic(using=...)`` and lock the dish rows they touch.
"""
import logging
from decimal import Decimal

from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.models import Sum

from inventory.models import MAX_DISH_ID, Dish
from .exceptions import DishNotFound, EmptySale, InsufficientStock, InvalidQuantity, UnknownTeam
from .models import SaleLine
from .teams import get_team, get_teams

logger = logging.getLogger(__name__)


def locked_dishes(dish_ids=None, using=DEFAULT_DB_ALIAS):
    """
    Dish rows locked with SELECT ... FOR UPDATE, in primary key order.

    A consistent lock order keeps two multi-dish sales from deadlocking.
    """
    queryset = Dish.objects.using(using).select_for_update()
    if dish_ids is not None:
        queryset = queryset.filter(pk__in=dish_ids)
    return queryset.order_by('pk')


def normalize_quantities(quantities):
    """Map dish id -> positive quantity, dropping zero entries"""
    if not isinstance(quantities, dict):
        raise InvalidQuantity()

    requested = {}
    for dish_id, quantity in quantities.items():
        if isinstance(quantity, (bool, float)):
            raise InvalidQuantity()
        try:
            dish_id = int(dish_id)
            quantity = int(quantity)
        except (TypeError, ValueError):
            raise InvalidQuantity()
        if quantity < 0:
            raise InvalidQuantity()
        if quantity > 0:
            if not 0 < dish_id <= MAX_DISH_ID:
                raise DishNotFound()
            requested[dish_id] = requested.get(dish_id, 0) + quantity
    return requested


def register_sale(team, quantities, using=DEFAULT_DB_ALIAS):
    """
    Sell ``quantities`` ({dish id: units}) on behalf of ``team``.

    Either every dish is updated and every ledger line written, or nothing
    is: the first dish without enough stock aborts the whole sale.
    Returns the created SaleLine rows.
    """
    if not team or get_team(team) is None:
        raise UnknownTeam()

    requested = normalize_quantities(quantities)
    if not requested:
        raise EmptySale()

    with transaction.atomic(using=using):
        dishes = {dish.pk: dish for dish in locked_dishes(list(requested), using=using)}

        lines = []
        for dish_id in sorted(requested):
            dish = dishes.get(dish_id)
            if dish is None:
                raise DishNotFound()

            quantity = requested[dish_id]
            new_sold = dish.units_sold + quantity
            if new_sold > dish.stock:
                raise InsufficientStock(dish)

            dish.units_sold = new_sold
            dish.save(using=using, update_fields=['units_sold'])
            lines.append(SaleLine.objects.using(using).create(team=team, dish=dish, quantity=quantity))

    logger.info(f"Sale registered for {team}: " + ', '.join(f"{line.quantity} x {line.dish.name}" for line in lines))
    return lines


def reset_sales(using=DEFAULT_DB_ALIAS):
    """Delete the whole ledger and set every dish back to zero units sold"""
    with transaction.atomic(using=using):
        list(locked_dishes(using=using).values_list('pk', flat=True))
        deleted, _ = SaleLine.objects.using(using).all().delete()
        Dish.objects.using(using).update(units_sold=0)

    logger.info(f"Sales reset, {deleted} ledger lines deleted")
    return deleted


def team_totals(using=DEFAULT_DB_ALIAS):
    """
    Units and revenue per configured team, folded from the ledger.

    Read-only and unlocked: under concurrent sales the result may trail the
    catalog slightly.
    """
    rows = (
        SaleLine.objects.using(using)
        .values('team', 'dish_id', 'dish__name', 'dish__sale_price')
        .annotate(total_sold=Sum('quantity'))
        .order_by('team', 'dish_id')
    )

    totals = {}
    revenue = {}
    for team in get_teams():
        totals[team.key] = {
            'nombre': team.name,
            'vendidos': 0,
            'total': 0,
            'platos': [],
            'meta': team.quota,
        }
        revenue[team.key] = Decimal('0.00')

    for row in rows:
        entry = totals.get(row['team'])
        if entry is None:
            logger.warning(f"Ledger lines for unknown team {row['team']!r} left out of the report")
            continue

        quantity = int(row['total_sold'])
        entry['vendidos'] += quantity
        revenue[row['team']] += quantity * row['dish__sale_price']
        entry['platos'].append({
            'nombre': row['dish__name'],
            'cantidad': quantity,
        })

    for key, entry in totals.items():
        entry['total'] = float(revenue[key])
    return totals
