from django.db import models


class SaleLine(models.Model):
    """One ledger row: ``quantity`` units of ``dish`` sold by ``team``"""
    team = models.CharField(max_length=50, db_column='equipo')
    dish = models.ForeignKey('inventory.Dish', on_delete=models.PROTECT, related_name='sale_lines', db_column='plato_id')
    quantity = models.PositiveIntegerField(db_column='cantidad')
    created_at = models.DateTimeField(auto_now_add=True, db_column='fecha')

    def __str__(self):
        return f"{self.team}: {self.quantity} x {self.dish.name}"

    class Meta:
        db_table = 'ventas'
        ordering = ['id']
        indexes = [
            models.Index(fields=['team', 'dish'], name='ventas_equipo_plato_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gt=0), name='ventas_cantidad_positive'),
        ]
