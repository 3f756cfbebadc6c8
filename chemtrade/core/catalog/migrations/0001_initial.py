import uuid

from django.db import migrations, models

import chemtrade.lib.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("uuid", models.UUIDField(default=uuid.uuid4, editable=False, unique=True, verbose_name="UUID")),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("sku", models.CharField(max_length=100, unique=True)),
                ("category", models.CharField(max_length=100)),
                ("sub_category", models.CharField(blank=True, max_length=100, null=True)),
                ("price", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ("cas_number", models.CharField(blank=True, default="", max_length=255)),
                ("stock_quantity", models.IntegerField(default=0)),
                ("is_active", models.BooleanField(default=True)),
                ("created", models.DateTimeField(validators=[chemtrade.lib.validators.validate_utc_datetime])),
                ("updated", models.DateTimeField(validators=[chemtrade.lib.validators.validate_utc_datetime])),
            ],
            options={
                "verbose_name": "Product",
                "verbose_name_plural": "Products",
                "indexes": [models.Index(fields=["category"], name="chemtrade_product_cat_idx")],
            },
        ),
    ]
