"""
Pytest configuration and fixtures for the kermesse backend.
"""

from decimal import Decimal

import pytest


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def dishes():
    """
    The default three-dish catalog, replacing whatever the seed migration created.
    """
    from inventory.models import Dish
    from sales.models import SaleLine

    SaleLine.objects.all().delete()
    Dish.objects.all().delete()

    return [
        Dish.objects.create(
            name="Pollo al Horno", stock=65, cost_price=Decimal("20.00"), sale_price=Decimal("35.00")
        ),
        Dish.objects.create(
            name="Fricassé", stock=65, cost_price=Decimal("18.00"), sale_price=Decimal("35.00")
        ),
        Dish.objects.create(
            name="Chicharrón", stock=65, cost_price=Decimal("22.00"), sale_price=Decimal("35.00")
        ),
    ]
