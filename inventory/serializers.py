from rest_framework import serializers
from .models import Dish


class DishSerializer(serializers.ModelSerializer):
    nombre = serializers.CharField(source='name', read_only=True)
    vendidos = serializers.IntegerField(source='units_sold', read_only=True)
    precio_costo = serializers.DecimalField(source='cost_price', max_digits=10, decimal_places=2, read_only=True)
    precio_venta = serializers.DecimalField(source='sale_price', max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = Dish
        fields = ['id', 'nombre', 'stock', 'vendidos', 'precio_costo', 'precio_venta']
        read_only_fields = ['id', 'stock']


class DishSoldCountSerializer(serializers.Serializer):
    """Request body of PUT /api/platos/<id>"""
    vendidos = serializers.IntegerField(
        error_messages={
            'required': 'La cantidad vendida es requerida',
            'null': 'La cantidad vendida es requerida',
            'invalid': 'La cantidad vendida debe ser un número entero',
        }
    )
