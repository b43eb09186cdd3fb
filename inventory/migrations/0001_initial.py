from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Dish',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(db_column='nombre', max_length=100)),
                ('stock', models.PositiveIntegerField()),
                ('units_sold', models.PositiveIntegerField(db_column='vendidos', default=0)),
                ('cost_price', models.DecimalField(db_column='precio_costo', decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('sale_price', models.DecimalField(db_column='precio_venta', decimal_places=2, default=Decimal('0.00'), max_digits=10)),
            ],
            options={
                'verbose_name_plural': 'Dishes',
                'db_table': 'platos',
                'ordering': ['id'],
            },
        ),
        migrations.AddConstraint(
            model_name='dish',
            constraint=models.CheckConstraint(condition=models.Q(('units_sold__lte', models.F('stock'))), name='platos_vendidos_within_stock'),
        ),
    ]
