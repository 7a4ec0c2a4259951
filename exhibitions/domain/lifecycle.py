"""Exhibition lifecycle transitions.

States and the operations allowed from each:

    Draft       --publish-->   Published   (requires information)
    Unpublished --publish-->   Published   (requires information)
    Published   --unpublish--> Unpublished
    Unpublished --draft-->     Draft
    Draft       --draft-->     Draft       (no-op)

A published exhibition cannot go straight back to draft; it has to be
unpublished first. Every function here is pure: it takes the current record
and the current time and returns a new record or raises.
"""

from dataclasses import replace
from datetime import datetime

from exhibitions.domain.errors import InformationRequiredError, InvalidTransitionError
from exhibitions.domain.models import Exhibition, ExhibitionStatus
from exhibitions.domain.value_objects import (
    ExhibitionId,
    ExhibitionInformationId,
    ExhibitorId,
)


def new_exhibition(
    exhibitor_id: ExhibitorId,
    information_id: ExhibitionInformationId | None,
    now: datetime,
) -> Exhibition:
    """Return a fresh exhibition in the draft state."""
    return Exhibition(
        id=ExhibitionId.new(),
        exhibitor_id=exhibitor_id,
        information_id=information_id,
        status=ExhibitionStatus.DRAFT,
        published_at=None,
        created_at=now,
        updated_at=now,
    )


def publish(exhibition: Exhibition, now: datetime) -> Exhibition:
    """Make the exhibition visible on the public listing.

    Raises:
        InformationRequiredError: If no information is attached.
        InvalidTransitionError: If the exhibition is already published.
    """
    if exhibition.information_id is None:
        raise InformationRequiredError()
    if exhibition.status is ExhibitionStatus.PUBLISHED:
        raise InvalidTransitionError("publish", "Exhibition is already published")

    return replace(
        exhibition,
        status=ExhibitionStatus.PUBLISHED,
        published_at=now,
        updated_at=now,
    )


def unpublish(exhibition: Exhibition, now: datetime) -> Exhibition:
    """Hide a published exhibition.

    Raises:
        InvalidTransitionError: If the exhibition is not published.
    """
    if exhibition.status is not ExhibitionStatus.PUBLISHED:
        raise InvalidTransitionError("unpublish", "Exhibition is already unpublished")

    return replace(
        exhibition,
        status=ExhibitionStatus.UNPUBLISHED,
        published_at=None,
        updated_at=now,
    )


def draft(exhibition: Exhibition, now: datetime) -> Exhibition:
    """Return an unpublished exhibition to draft.

    A draft exhibition is returned as-is.

    Raises:
        InvalidTransitionError: If the exhibition is published.
    """
    if exhibition.status is ExhibitionStatus.PUBLISHED:
        raise InvalidTransitionError(
            "draft",
            "A published exhibition cannot be returned to draft; unpublish it first",
        )
    if exhibition.status is ExhibitionStatus.DRAFT:
        return exhibition

    return replace(exhibition, status=ExhibitionStatus.DRAFT, updated_at=now)


def is_owned_by(exhibition: Exhibition, exhibitor_id: ExhibitorId) -> bool:
    return exhibition.exhibitor_id == exhibitor_id
