"""Django ORM implementations of the stores.

All queries go through Django's async query API so the services can await
them. Related rows are never loaded lazily: reads use the ``*_id`` columns.
"""

import logging

from django.db import IntegrityError
from django.db.models import Count, Q

from exhibitions import models
from exhibitions.domain import (
    ArDesign,
    ArDesignId,
    Category,
    CategoryCount,
    Exhibition,
    ExhibitionId,
    ExhibitionInformation,
    ExhibitionInformationId,
    ExhibitionStatus,
    Exhibitor,
    ExhibitorId,
    Page,
    PublishedQuery,
)
from exhibitions.domain.errors import ExhibitionAlreadyExistsError, ExhibitorNameTakenError
from exhibitions.stores.interfaces import (
    ArDesignStore,
    ExhibitionInformationStore,
    ExhibitionStore,
    ExhibitorStore,
)

logger = logging.getLogger(__name__)


def _optional_id(id_type, value):
    return id_type(value) if value is not None else None


def exhibition_to_domain(row: models.Exhibition) -> Exhibition:
    return Exhibition(
        id=ExhibitionId(row.id),
        exhibitor_id=ExhibitorId(row.exhibitor_id),
        information_id=_optional_id(ExhibitionInformationId, row.information_id),
        status=ExhibitionStatus.from_flags(row.is_draft, row.is_published),
        published_at=row.published_at,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def information_to_domain(row: models.ExhibitionInformation) -> ExhibitionInformation:
    return ExhibitionInformation(
        id=ExhibitionInformationId(row.id),
        exhibitor_id=ExhibitorId(row.exhibitor_id),
        exhibitor_name=row.exhibitor_name,
        title=row.title,
        category=Category(row.category),
        location=row.location,
        price=row.price,
        required_time=row.required_time,
        comment=row.comment,
        ar_design_id=_optional_id(ArDesignId, row.ar_design_id),
        # BinaryField comes back as memoryview on PostgreSQL.
        image=bytes(row.image) if row.image is not None else None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def ar_design_to_domain(row: models.ArDesign) -> ArDesign:
    return ArDesign(id=ArDesignId(row.id), url=row.url)


def exhibitor_to_domain(row: models.Exhibitor) -> Exhibitor:
    return Exhibitor(
        id=ExhibitorId(row.id),
        name=row.name,
        password_hash=row.password_hash,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoExhibitionStore(ExhibitionStore):
    """Exhibition store backed by the Django ORM."""

    @staticmethod
    def _published():
        return models.Exhibition.objects.filter(
            is_published=1, information__isnull=False
        )

    async def save(self, exhibition: Exhibition) -> None:
        is_draft, is_published = exhibition.status.flags
        await models.Exhibition.objects.aupdate_or_create(
            id=exhibition.id.value,
            defaults={
                "exhibitor_id": exhibition.exhibitor_id.value,
                "information_id": (
                    exhibition.information_id.value
                    if exhibition.information_id is not None
                    else None
                ),
                "is_draft": is_draft,
                "is_published": is_published,
                "published_at": exhibition.published_at,
                "created_at": exhibition.created_at,
                "updated_at": exhibition.updated_at,
            },
        )

    async def find_by_id(self, exhibition_id: ExhibitionId) -> Exhibition | None:
        row = await models.Exhibition.objects.filter(id=exhibition_id.value).afirst()
        return exhibition_to_domain(row) if row is not None else None

    async def find_by_exhibitor_id(self, exhibitor_id: ExhibitorId) -> list[Exhibition]:
        queryset = models.Exhibition.objects.filter(exhibitor_id=exhibitor_id.value).order_by(
            "created_at"
        )
        return [exhibition_to_domain(row) async for row in queryset]

    async def delete(self, exhibition_id: ExhibitionId) -> None:
        await models.Exhibition.objects.filter(id=exhibition_id.value).adelete()

    async def find_published(self, query: PublishedQuery) -> Page[Exhibition]:
        queryset = self._published()
        if query.category is not None:
            queryset = queryset.filter(information__category=query.category.value)
        if query.search:
            queryset = queryset.filter(
                Q(information__title__icontains=query.search)
                | Q(information__exhibitor_name__icontains=query.search)
                | Q(information__comment__icontains=query.search)
            )

        total = await queryset.acount()
        window = queryset.order_by("-published_at", "id")[
            query.offset : query.offset + query.per_page
        ]
        items = [exhibition_to_domain(row) async for row in window]
        return Page(items=items, total=total, page=query.page, per_page=query.per_page)

    async def find_published_by_id(self, exhibition_id: ExhibitionId) -> Exhibition | None:
        row = await self._published().filter(id=exhibition_id.value).afirst()
        return exhibition_to_domain(row) if row is not None else None

    async def find_category_counts(self) -> list[CategoryCount]:
        rows = (
            self._published()
            .values("information__category")
            .annotate(count=Count("id"))
            .order_by("information__category")
        )
        return [
            CategoryCount(category=Category(row["information__category"]), count=row["count"])
            async for row in rows
        ]


class DjangoExhibitionInformationStore(ExhibitionInformationStore):
    """Exhibition information store backed by the Django ORM."""

    async def save(self, information: ExhibitionInformation) -> None:
        try:
            await models.ExhibitionInformation.objects.aupdate_or_create(
                id=information.id.value,
                defaults={
                    "exhibitor_id": information.exhibitor_id.value,
                    "exhibitor_name": information.exhibitor_name,
                    "title": information.title,
                    "category": information.category.value,
                    "location": information.location,
                    "price": information.price,
                    "required_time": information.required_time,
                    "comment": information.comment,
                    "ar_design_id": (
                        information.ar_design_id.value
                        if information.ar_design_id is not None
                        else None
                    ),
                    "image": information.image,
                    "created_at": information.created_at,
                    "updated_at": information.updated_at,
                },
            )
        except IntegrityError:
            duplicate = (
                await models.ExhibitionInformation.objects.filter(
                    exhibitor_id=information.exhibitor_id.value
                )
                .exclude(id=information.id.value)
                .aexists()
            )
            if duplicate:
                raise ExhibitionAlreadyExistsError() from None
            raise

    async def find_by_id(
        self, information_id: ExhibitionInformationId
    ) -> ExhibitionInformation | None:
        row = await models.ExhibitionInformation.objects.filter(
            id=information_id.value
        ).afirst()
        return information_to_domain(row) if row is not None else None

    async def find_by_ids(
        self, information_ids: list[ExhibitionInformationId]
    ) -> list[ExhibitionInformation]:
        if not information_ids:
            return []
        queryset = models.ExhibitionInformation.objects.filter(
            id__in=[information_id.value for information_id in information_ids]
        )
        return [information_to_domain(row) async for row in queryset]

    async def find_by_exhibitor_id(
        self, exhibitor_id: ExhibitorId
    ) -> list[ExhibitionInformation]:
        queryset = models.ExhibitionInformation.objects.filter(
            exhibitor_id=exhibitor_id.value
        )
        return [information_to_domain(row) async for row in queryset]

    async def delete(self, information_id: ExhibitionInformationId) -> None:
        await models.ExhibitionInformation.objects.filter(id=information_id.value).adelete()


class DjangoArDesignStore(ArDesignStore):
    """AR design store backed by the Django ORM."""

    async def find_by_id(self, ar_design_id: ArDesignId) -> ArDesign | None:
        row = await models.ArDesign.objects.filter(id=ar_design_id.value).afirst()
        return ar_design_to_domain(row) if row is not None else None

    async def find_by_ids(self, ar_design_ids: list[ArDesignId]) -> list[ArDesign]:
        if not ar_design_ids:
            return []
        queryset = models.ArDesign.objects.filter(
            id__in=[ar_design_id.value for ar_design_id in ar_design_ids]
        )
        return [ar_design_to_domain(row) async for row in queryset]

    async def find_all(self) -> list[ArDesign]:
        queryset = models.ArDesign.objects.order_by("url", "id")
        return [ar_design_to_domain(row) async for row in queryset]


class DjangoExhibitorStore(ExhibitorStore):
    """Exhibitor store backed by the Django ORM."""

    async def save(self, exhibitor: Exhibitor) -> None:
        try:
            await models.Exhibitor.objects.aupdate_or_create(
                id=exhibitor.id.value,
                defaults={
                    "name": exhibitor.name,
                    "password_hash": exhibitor.password_hash,
                    "created_at": exhibitor.created_at,
                    "updated_at": exhibitor.updated_at,
                },
            )
        except IntegrityError:
            taken = (
                await models.Exhibitor.objects.filter(name=exhibitor.name)
                .exclude(id=exhibitor.id.value)
                .aexists()
            )
            if taken:
                logger.info("Exhibitor name %r is already taken", exhibitor.name)
                raise ExhibitorNameTakenError() from None
            raise

    async def find_by_id(self, exhibitor_id: ExhibitorId) -> Exhibitor | None:
        row = await models.Exhibitor.objects.filter(id=exhibitor_id.value).afirst()
        return exhibitor_to_domain(row) if row is not None else None

    async def find_by_name(self, name: str) -> Exhibitor | None:
        row = await models.Exhibitor.objects.filter(name=name).afirst()
        return exhibitor_to_domain(row) if row is not None else None
