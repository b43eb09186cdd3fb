from decimal import Decimal

from django.db import models

# Largest primary key a BigAutoField can hold
MAX_DISH_ID = 2 ** 63 - 1


class Dish(models.Model):
    """A sellable dish with a fixed stock for the whole event"""
    name = models.CharField(max_length=100, db_column='nombre')
    stock = models.PositiveIntegerField()
    units_sold = models.PositiveIntegerField(default=0, db_column='vendidos')
    cost_price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'), db_column='precio_costo')
    sale_price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'), db_column='precio_venta')

    @property
    def remaining(self):
        return self.stock - self.units_sold

    def __str__(self):
        return self.name

    class Meta:
        db_table = 'platos'
        ordering = ['id']
        verbose_name_plural = "Dishes"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(units_sold__lte=models.F('stock')),
                name='platos_vendidos_within_stock',
            ),
        ]
