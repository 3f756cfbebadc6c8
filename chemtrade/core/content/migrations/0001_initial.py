from django.db import migrations, models

import chemtrade.lib.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ContentEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(max_length=255, unique=True)),
                ("live_value", models.TextField(blank=True, default="")),
                ("draft_value", models.TextField(blank=True, null=True)),
                ("is_published", models.BooleanField(default=False)),
                (
                    "last_published_at",
                    models.DateTimeField(
                        blank=True, null=True, validators=[chemtrade.lib.validators.validate_utc_datetime]
                    ),
                ),
                ("updated", models.DateTimeField(validators=[chemtrade.lib.validators.validate_utc_datetime])),
            ],
            options={
                "verbose_name": "Content Entry",
                "verbose_name_plural": "Content Entries",
            },
        ),
    ]
