from django.db import migrations, models

import catalog.products.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("name", models.TextField()),
                ("price", catalog.products.models.RealField()),
                ("discount", catalog.products.models.RealField()),
                ("store", models.TextField()),
            ],
            options={
                "db_table": "products",
                "ordering": ["id"],
            },
        ),
    ]
