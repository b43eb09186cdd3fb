import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('inventory', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='SaleLine',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('team', models.CharField(db_column='equipo', max_length=50)),
                ('quantity', models.PositiveIntegerField(db_column='cantidad')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_column='fecha')),
                ('dish', models.ForeignKey(db_column='plato_id', on_delete=django.db.models.deletion.PROTECT, related_name='sale_lines', to='inventory.dish')),
            ],
            options={
                'db_table': 'ventas',
                'ordering': ['id'],
            },
        ),
        migrations.AddIndex(
            model_name='saleline',
            index=models.Index(fields=['team', 'dish'], name='ventas_equipo_plato_idx'),
        ),
        migrations.AddConstraint(
            model_name='saleline',
            constraint=models.CheckConstraint(condition=models.Q(('quantity__gt', 0)), name='ventas_cantidad_positive'),
        ),
    ]
