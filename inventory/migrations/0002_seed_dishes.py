from decimal import Decimal

from django.conf import settings
from django.db import migrations


def seed_dishes(apps, schema_editor):
    Dish = apps.get_model('inventory', 'Dish')
    db_alias = schema_editor.connection.alias
    if Dish.objects.using(db_alias).exists():
        return
    for dish in settings.KERMESSE_DISHES:
        Dish.objects.using(db_alias).create(
            name=dish['name'],
            stock=dish['stock'],
            cost_price=Decimal(str(dish['cost_price'])),
            sale_price=Decimal(str(dish['sale_price'])),
        )


class Migration(migrations.Migration):

    dependencies = [
        ('inventory', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_dishes, migrations.RunPython.noop),
    ]
