"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
Timestamps are set by the domain layer, not by the database.
"""

import uuid

from django.db import models
from django.db.models import Q

from exhibitions.domain.value_objects import Category


class Exhibitor(models.Model):
    """Persistence model for exhibitor accounts."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    password_hash = models.CharField(max_length=255)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class ArDesign(models.Model):
    """Persistence model for AR design reference data."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    url = models.URLField(max_length=500, blank=True, null=True)

    class Meta:
        verbose_name = "AR design"

    def __str__(self) -> str:
        return self.url or str(self.id)


class ExhibitionInformation(models.Model):
    """Persistence model for exhibition content."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    exhibitor = models.OneToOneField(
        Exhibitor, on_delete=models.CASCADE, related_name="exhibition_information"
    )
    exhibitor_name = models.CharField(max_length=100)
    title = models.CharField(max_length=200)
    category = models.CharField(max_length=20, choices=Category.choices())
    location = models.CharField(max_length=100)
    price = models.PositiveIntegerField(blank=True, null=True)
    required_time = models.PositiveIntegerField(blank=True, null=True)
    comment = models.CharField(max_length=100, blank=True, null=True)
    ar_design = models.ForeignKey(
        ArDesign,
        on_delete=models.PROTECT,
        related_name="exhibition_informations",
        blank=True,
        null=True,
    )
    image = models.BinaryField(blank=True, null=True)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        indexes = [
            models.Index(fields=["category"], name="exhibition_info_category_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Exhibition(models.Model):
    """Persistence model for the exhibition lifecycle.

    is_draft and is_published are stored as 0/1 integers.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    exhibitor = models.ForeignKey(
        Exhibitor, on_delete=models.CASCADE, related_name="exhibitions"
    )
    information = models.ForeignKey(
        ExhibitionInformation,
        on_delete=models.PROTECT,
        related_name="exhibitions",
        blank=True,
        null=True,
    )
    is_draft = models.PositiveSmallIntegerField(default=1)
    is_published = models.PositiveSmallIntegerField(default=0)
    published_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()

    class Meta:
        ordering = ["-published_at", "-created_at"]
        indexes = [
            models.Index(fields=["is_published", "-published_at"], name="exhibition_published_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(is_draft__in=[0, 1]), name="exhibition_is_draft_flag"
            ),
            models.CheckConstraint(
                condition=Q(is_published__in=[0, 1]), name="exhibition_is_published_flag"
            ),
            models.CheckConstraint(
                condition=~Q(is_draft=1, is_published=1),
                name="exhibition_not_draft_and_published",
            ),
        ]

    def __str__(self) -> str:
        return str(self.id)
