import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                ("description", models.TextField(max_length=1000)),
                ("starts_at", models.DateTimeField()),
                ("location", models.CharField(max_length=300)),
                ("image_url", models.URLField(max_length=500)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("total", models.PositiveIntegerField()),
                ("available", models.PositiveIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "promoter",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="events",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["starts_at"],
                "indexes": [
                    models.Index(fields=["starts_at"], name="event_starts_at_idx"),
                    models.Index(fields=["promoter", "-created_at"], name="event_promoter_created_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("total__gte", 1)), name="event_total_at_least_one"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("available__lte", models.F("total"))),
                        name="event_available_within_total",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("price__gte", 0)), name="event_price_not_negative"
                    ),
                ],
            },
        ),
    ]
