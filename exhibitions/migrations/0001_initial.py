import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ArDesign",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("url", models.URLField(blank=True, max_length=500, null=True)),
            ],
            options={
                "verbose_name": "AR design",
            },
        ),
        migrations.CreateModel(
            name="Exhibitor",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(max_length=100, unique=True)),
                ("password_hash", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="ExhibitionInformation",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("exhibitor_name", models.CharField(max_length=100)),
                ("title", models.CharField(max_length=200)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Food", "Food"),
                            ("Exhibition", "Exhibition"),
                            ("Experience", "Experience"),
                            ("Stage", "Stage"),
                        ],
                        max_length=20,
                    ),
                ),
                ("location", models.CharField(max_length=100)),
                ("price", models.PositiveIntegerField(blank=True, null=True)),
                ("required_time", models.PositiveIntegerField(blank=True, null=True)),
                ("comment", models.CharField(blank=True, max_length=100, null=True)),
                ("image", models.BinaryField(blank=True, null=True)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
                (
                    "ar_design",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="exhibition_informations",
                        to="exhibitions.ardesign",
                    ),
                ),
                (
                    "exhibitor",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="exhibition_information",
                        to="exhibitions.exhibitor",
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["category"], name="exhibition_info_category_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="Exhibition",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("is_draft", models.PositiveSmallIntegerField(default=1)),
                ("is_published", models.PositiveSmallIntegerField(default=0)),
                ("published_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
                (
                    "exhibitor",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="exhibitions",
                        to="exhibitions.exhibitor",
                    ),
                ),
                (
                    "information",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="exhibitions",
                        to="exhibitions.exhibitioninformation",
                    ),
                ),
            ],
            options={
                "ordering": ["-published_at", "-created_at"],
                "indexes": [
                    models.Index(
                        fields=["is_published", "-published_at"],
                        name="exhibition_published_idx",
                    )
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("is_draft__in", [0, 1])),
                        name="exhibition_is_draft_flag",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("is_published__in", [0, 1])),
                        name="exhibition_is_published_flag",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("is_draft", 1), ("is_published", 1), _negated=True),
                        name="exhibition_not_draft_and_published",
                    ),
                ],
            },
        ),
    ]
