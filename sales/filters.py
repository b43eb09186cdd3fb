import django_filters

from .models import SaleLine


class SaleLineFilter(django_filters.FilterSet):
    """Query parameters of GET /api/ventas"""
    equipo = django_filters.CharFilter(field_name='team')
    plato = django_filters.NumberFilter(field_name='dish_id')

    class Meta:
        model = SaleLine
        fields = ['equipo', 'plato']
