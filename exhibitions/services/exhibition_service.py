"""Exhibition service - all exhibitor-facing business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every operation on an existing exhibition goes through ``_load_owned``:
a missing exhibition is reported as not found, and only then is ownership
checked, so another exhibitor's exhibition is always forbidden.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from exhibitions.domain import (
    ArDesign,
    ArDesignId,
    Exhibition,
    ExhibitionId,
    ExhibitionImage,
    ExhibitionInformation,
    ExhibitionView,
    ExhibitorId,
    SetTo,
)
from exhibitions.domain import lifecycle
from exhibitions.domain.errors import (
    ArDesignNotFoundError,
    ExhibitionAlreadyExistsError,
    ExhibitionForbiddenError,
    ExhibitionInformationNotFoundError,
    ExhibitionNotFoundError,
    ImageNotFoundError,
    InformationRequiredError,
    InvalidIdError,
)
from exhibitions.domain.images import DEFAULT_CONTENT_TYPE, detect_content_type
from exhibitions.domain.information import (
    InformationContent,
    InformationUpdate,
    create_information,
    update_information,
)
from exhibitions.domain.value_objects import CLEAR
from exhibitions.stores.interfaces import (
    ArDesignStore,
    ExhibitionInformationStore,
    ExhibitionStore,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_id(id_type, value, field: str = "id"):
    """Parse a raw identifier into its value object.

    Raises:
        InvalidIdError: If the value is not a valid UUID.
    """
    if isinstance(value, id_type):
        return value
    try:
        return id_type.from_string(value)
    except (TypeError, ValueError, AttributeError):
        raise InvalidIdError(field) from None


class ExhibitionService:
    """Service for exhibitor-scoped exhibition operations."""

    def __init__(
        self,
        exhibitions: ExhibitionStore,
        informations: ExhibitionInformationStore,
        ar_designs: ArDesignStore,
        clock: Clock = utc_now,
    ) -> None:
        self._exhibitions = exhibitions
        self._informations = informations
        self._ar_designs = ar_designs
        self._clock = clock

    # Shared steps

    async def _load_owned(self, exhibition_id: str, exhibitor_id: str) -> Exhibition:
        """Return the exhibition if it exists and belongs to the caller.

        Raises:
            InvalidIdError: If either ID is malformed.
            ExhibitionNotFoundError: If the exhibition does not exist.
            ExhibitionForbiddenError: If another exhibitor owns it.
        """
        parsed_id = parse_id(ExhibitionId, exhibition_id, "exhibition_id")
        owner_id = parse_id(ExhibitorId, exhibitor_id, "exhibitor_id")

        exhibition = await self._exhibitions.find_by_id(parsed_id)
        if exhibition is None:
            raise ExhibitionNotFoundError(str(parsed_id))
        if not lifecycle.is_owned_by(exhibition, owner_id):
            logger.warning(
                "Exhibitor %s attempted to access exhibition %s", owner_id, parsed_id
            )
            raise ExhibitionForbiddenError(str(parsed_id))
        return exhibition

    async def _load_information(self, exhibition: Exhibition) -> ExhibitionInformation:
        """Return the information attached to an exhibition.

        Raises:
            InformationRequiredError: If the exhibition has no information.
            ExhibitionInformationNotFoundError: If the referenced record is missing.
        """
        if exhibition.information_id is None:
            raise InformationRequiredError()
        information = await self._informations.find_by_id(exhibition.information_id)
        if information is None:
            raise ExhibitionInformationNotFoundError(str(exhibition.information_id))
        return information

    async def _ensure_ar_design(self, ar_design_id: ArDesignId | None) -> None:
        if ar_design_id is None:
            return
        if await self._ar_designs.find_by_id(ar_design_id) is None:
            raise ArDesignNotFoundError(str(ar_design_id))

    async def _assemble(
        self,
        exhibition: Exhibition,
        information: ExhibitionInformation | None = None,
    ) -> ExhibitionView:
        """Join an exhibition with its information and AR design."""
        if information is None and exhibition.information_id is not None:
            information = await self._informations.find_by_id(exhibition.information_id)

        ar_design: ArDesign | None = None
        if information is not None and information.ar_design_id is not None:
            ar_design = await self._ar_designs.find_by_id(information.ar_design_id)
        return ExhibitionView(exhibition=exhibition, information=information, ar_design=ar_design)

    async def _transition(
        self,
        exhibition_id: str,
        exhibitor_id: str,
        operation: Callable[[Exhibition, datetime], Exhibition],
    ) -> ExhibitionView:
        exhibition = await self._load_owned(exhibition_id, exhibitor_id)
        updated = operation(exhibition, self._clock())
        if updated is not exhibition:
            await self._exhibitions.save(updated)
            logger.info(
                "Exhibition %s moved from %s to %s",
                updated.id,
                exhibition.status.value,
                updated.status.value,
            )
        return await self._assemble(updated)

    # Operations

    async def create(self, exhibitor_id: str, content: InformationContent) -> ExhibitionView:
        """Create the caller's exhibition together with its information.

        The information is written before the exhibition so the reference
        from exhibition to information is always satisfiable. If the
        exhibition write fails, the information is removed again.

        Raises:
            ExhibitionAlreadyExistsError: If the exhibitor already has information.
            ArDesignNotFoundError: If the AR design does not exist.
            FieldValidationError: If a field is out of bounds.
        """
        owner_id = parse_id(ExhibitorId, exhibitor_id, "exhibitor_id")

        if await self._informations.find_by_exhibitor_id(owner_id):
            raise ExhibitionAlreadyExistsError()

        now = self._clock()
        information = create_information(owner_id, content, now)
        await self._ensure_ar_design(information.ar_design_id)
        exhibition = lifecycle.new_exhibition(owner_id, information.id, now)

        await self._informations.save(information)
        try:
            await self._exhibitions.save(exhibition)
        except Exception:
            logger.warning(
                "Saving exhibition for information %s failed; removing information",
                information.id,
            )
            try:
                await self._informations.delete(information.id)
            except Exception:
                logger.exception("Removing information %s failed", information.id)
            raise

        logger.info("Created exhibition %s for exhibitor %s", exhibition.id, owner_id)
        return await self._assemble(exhibition, information)

    async def get(self, exhibition_id: str, exhibitor_id: str) -> ExhibitionView:
        exhibition = await self._load_owned(exhibition_id, exhibitor_id)
        return await self._assemble(exhibition)

    async def get_mine(self, exhibitor_id: str) -> ExhibitionView | None:
        """Return the caller's exhibition, or None if they have not created one."""
        owner_id = parse_id(ExhibitorId, exhibitor_id, "exhibitor_id")
        exhibitions = await self._exhibitions.find_by_exhibitor_id(owner_id)
        if not exhibitions:
            return None
        return await self._assemble(exhibitions[0])

    async def update_information(
        self, exhibition_id: str, exhibitor_id: str, changes: InformationUpdate
    ) -> ExhibitionView:
        """Apply a partial update to the exhibition's information.

        Raises:
            InformationRequiredError: If the exhibition has no information.
            ExhibitionInformationNotFoundError: If the information record is missing.
            ArDesignNotFoundError: If a new AR design does not exist.
            FieldValidationError: If a field is out of bounds.
        """
        exhibition = await self._load_owned(exhibition_id, exhibitor_id)
        existing = await self._load_information(exhibition)

        updated = update_information(existing, changes, self._clock())
        if isinstance(changes.ar_design_id, SetTo):
            await self._ensure_ar_design(updated.ar_design_id)

        await self._informations.save(updated)
        logger.info(
            "Updated information %s fields=%s", updated.id, changes.changed_fields()
        )
        return await self._assemble(exhibition, updated)

    async def delete(self, exhibition_id: str, exhibitor_id: str) -> None:
        """Delete the exhibition and then its information.

        If the information cannot be deleted, the exhibition is written back
        so the pair stays consistent.
        """
        exhibition = await self._load_owned(exhibition_id, exhibitor_id)

        await self._exhibitions.delete(exhibition.id)
        if exhibition.information_id is None:
            logger.info("Deleted exhibition %s", exhibition.id)
            return

        try:
            await self._informations.delete(exhibition.information_id)
        except Exception:
            logger.warning(
                "Deleting information %s failed; restoring exhibition %s",
                exhibition.information_id,
                exhibition.id,
            )
            try:
                await self._exhibitions.save(exhibition)
            except Exception:
                logger.exception("Restoring exhibition %s failed", exhibition.id)
            raise
        logger.info(
            "Deleted exhibition %s and information %s",
            exhibition.id,
            exhibition.information_id,
        )

    async def publish(self, exhibition_id: str, exhibitor_id: str) -> ExhibitionView:
        return await self._transition(exhibition_id, exhibitor_id, lifecycle.publish)

    async def unpublish(self, exhibition_id: str, exhibitor_id: str) -> ExhibitionView:
        return await self._transition(exhibition_id, exhibitor_id, lifecycle.unpublish)

    async def draft(self, exhibition_id: str, exhibitor_id: str) -> ExhibitionView:
        return await self._transition(exhibition_id, exhibitor_id, lifecycle.draft)

    async def upload_image(self, exhibition_id: str, exhibitor_id: str, image: bytes) -> None:
        """Store or replace the image. The bytes must already satisfy the upload policy."""
        exhibition = await self._load_owned(exhibition_id, exhibitor_id)
        information = await self._load_information(exhibition)
        updated = update_information(
            information, InformationUpdate(image=SetTo(image)), self._clock()
        )
        await self._informations.save(updated)

    async def delete_image(self, exhibition_id: str, exhibitor_id: str) -> None:
        exhibition = await self._load_owned(exhibition_id, exhibitor_id)
        information = await self._load_information(exhibition)
        if information.image is None:
            raise ImageNotFoundError()
        updated = update_information(
            information, InformationUpdate(image=CLEAR), self._clock()
        )
        await self._informations.save(updated)

    async def get_image(self, exhibition_id: str, exhibitor_id: str) -> ExhibitionImage:
        """Return the stored image with a content type sniffed from its bytes."""
        exhibition = await self._load_owned(exhibition_id, exhibitor_id)
        if exhibition.information_id is None:
            raise ImageNotFoundError()
        information = await self._informations.find_by_id(exhibition.information_id)
        if information is None or information.image is None:
            raise ImageNotFoundError()
        content_type = detect_content_type(information.image) or DEFAULT_CONTENT_TYPE
        return ExhibitionImage(data=information.image, content_type=content_type)

    async def list_ar_designs(self) -> list[ArDesign]:
        return await self._ar_designs.find_all()
