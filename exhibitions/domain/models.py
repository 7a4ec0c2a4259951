"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in exhibitions/models.py (persistence layer).
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Generic, TypeVar

from exhibitions.domain.value_objects import (
    ArDesignId,
    Category,
    ExhibitionId,
    ExhibitionInformationId,
    ExhibitorId,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Exhibitor:
    """Domain representation of a registered Exhibitor."""

    id: ExhibitorId
    name: str
    password_hash: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ArDesign:
    """Reference to an augmented-reality asset."""

    id: ArDesignId
    url: str | None


@dataclass(frozen=True)
class ExhibitionInformation:
    """Domain representation of the content shown for an exhibition."""

    id: ExhibitionInformationId
    exhibitor_id: ExhibitorId
    exhibitor_name: str
    title: str
    category: Category
    location: str
    price: int | None
    required_time: int | None
    comment: str | None
    ar_design_id: ArDesignId | None
    image: bytes | None
    created_at: datetime
    updated_at: datetime


class ExhibitionStatus(Enum):
    """Publication state of an exhibition."""

    DRAFT = "draft"
    UNPUBLISHED = "unpublished"
    PUBLISHED = "published"

    @property
    def flags(self) -> tuple[int, int]:
        """Legacy (is_draft, is_published) projection used for storage."""
        return _FLAGS[self]

    @classmethod
    def from_flags(cls, is_draft: int, is_published: int) -> "ExhibitionStatus":
        for status, flags in _FLAGS.items():
            if flags == (int(is_draft), int(is_published)):
                return status
        raise ValueError(
            f"Invalid exhibition flags: is_draft={is_draft}, is_published={is_published}"
        )


_FLAGS = {
    ExhibitionStatus.DRAFT: (1, 0),
    ExhibitionStatus.UNPUBLISHED: (0, 0),
    ExhibitionStatus.PUBLISHED: (0, 1),
}


@dataclass(frozen=True)
class Exhibition:
    """Lifecycle and ownership wrapper around ExhibitionInformation."""

    id: ExhibitionId
    exhibitor_id: ExhibitorId
    information_id: ExhibitionInformationId | None
    status: ExhibitionStatus
    published_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @property
    def is_draft(self) -> int:
        return self.status.flags[0]

    @property
    def is_published(self) -> int:
        return self.status.flags[1]


@dataclass(frozen=True)
class ExhibitionView:
    """An exhibition joined with its information and AR design."""

    exhibition: Exhibition
    information: ExhibitionInformation | None
    ar_design: ArDesign | None = None


@dataclass(frozen=True)
class PublicExhibitionView:
    """A published exhibition as shown to visitors."""

    id: ExhibitionId
    information: ExhibitionInformation
    ar_design: ArDesign | None
    published_at: datetime | None


@dataclass(frozen=True)
class ExhibitionImage:
    data: bytes
    content_type: str


@dataclass(frozen=True)
class CategoryCount:
    category: Category
    count: int


@dataclass(frozen=True)
class PublishedQuery:
    """Filter and pagination for the public listing."""

    category: Category | None = None
    search: str | None = None
    page: int = 1
    per_page: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total number of matches."""

    items: list[T]
    total: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return math.ceil(self.total / self.per_page)
