from django.db import migrations, models
import time


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="GridEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("timestamp", models.FloatField(default=time.time)),
                ("x", models.PositiveSmallIntegerField()),
                ("y", models.PositiveSmallIntegerField()),
                ("name", models.TextField()),
                ("message", models.TextField()),
            ],
        ),
        migrations.AddConstraint(
            model_name="gridentry",
            constraint=models.UniqueConstraint(fields=("x", "y"), name="grid_entry_cell_unique"),
        ),
    ]
