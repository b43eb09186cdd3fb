from rest_framework import serializers
from django.db import DEFAULT_DB_ALIAS

from inventory.models import MAX_DISH_ID
from .models import SaleLine
from .services import register_sale
from .teams import get_team


class SaleLineSerializer(serializers.ModelSerializer):
    equipo = serializers.CharField(source='team', read_only=True)
    plato = serializers.PrimaryKeyRelatedField(source='dish', read_only=True)
    plato_nombre = serializers.CharField(source='dish.name', read_only=True)
    cantidad = serializers.IntegerField(source='quantity', read_only=True)
    fecha = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = SaleLine
        fields = ['id', 'equipo', 'plato', 'plato_nombre', 'cantidad', 'fecha']


class SaleCreateSerializer(serializers.Serializer):
    """Request body of POST /api/ventas"""
    equipo = serializers.CharField(
        error_messages={
            'required': 'Debes seleccionar un equipo',
            'blank': 'Debes seleccionar un equipo',
            'null': 'Debes seleccionar un equipo',
        }
    )
    cantidades = serializers.DictField(
        child=serializers.IntegerField(
            min_value=0,
            error_messages={
                'invalid': 'Las cantidades deben ser números enteros',
                'min_value': 'Las cantidades no pueden ser negativas',
            }
        ),
        error_messages={
            'required': 'Debes vender al menos un plato',
            'not_a_dict': 'Las cantidades deben enviarse como un objeto {plato: cantidad}',
        }
    )

    def validate_equipo(self, value):
        if get_team(value) is None:
            raise serializers.ValidationError(f'Equipo desconocido: {value}')
        return value

    def validate_cantidades(self, value):
        for dish_id, quantity in value.items():
            try:
                parsed_id = int(dish_id)
            except (TypeError, ValueError):
                raise serializers.ValidationError(f'Identificador de plato no válido: {dish_id}')
            if quantity > 0 and not 0 < parsed_id <= MAX_DISH_ID:
                raise serializers.ValidationError('Plato no encontrado')
        if not any(quantity > 0 for quantity in value.values()):
            raise serializers.ValidationError('Debes vender al menos un plato')
        return value

    def create(self, validated_data):
        return register_sale(
            validated_data['equipo'],
            validated_data['cantidades'],
            using=self.context.get('using', DEFAULT_DB_ALIAS),
        )
