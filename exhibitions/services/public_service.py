"""Public (unauthenticated) read operations over published exhibitions."""

import logging

from exhibitions.domain import (
    Category,
    CategoryCount,
    Exhibition,
    ExhibitionId,
    Page,
    PublicExhibitionView,
    PublishedQuery,
)
from exhibitions.domain.errors import ExhibitionNotFoundError, FieldValidationError
from exhibitions.domain.information import validate_category
from exhibitions.services.exhibition_service import parse_id
from exhibitions.stores.interfaces import (
    ArDesignStore,
    ExhibitionInformationStore,
    ExhibitionStore,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 100


class PublicExhibitionService:
    """Service for the public exhibition listing."""

    def __init__(
        self,
        exhibitions: ExhibitionStore,
        informations: ExhibitionInformationStore,
        ar_designs: ArDesignStore,
    ) -> None:
        self._exhibitions = exhibitions
        self._informations = informations
        self._ar_designs = ar_designs

    async def list_published(
        self,
        category: str | None = None,
        search: str | None = None,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> Page[PublicExhibitionView]:
        """Return one page of published exhibitions.

        Raises:
            FieldValidationError: If the category is unknown, page is below 1,
                or per_page is outside 1-100.
        """
        if page < 1:
            raise FieldValidationError("page", "page must be 1 or greater")
        if not 1 <= per_page <= MAX_PER_PAGE:
            raise FieldValidationError(
                "per_page", f"per_page must be between 1 and {MAX_PER_PAGE}"
            )
        query = PublishedQuery(
            category=validate_category(category) if category else None,
            search=(search or "").strip() or None,
            page=page,
            per_page=per_page,
        )

        result = await self._exhibitions.find_published(query)
        items = await self._join(result.items)
        return Page(items=items, total=result.total, page=result.page, per_page=result.per_page)

    async def get_published(self, exhibition_id: str) -> PublicExhibitionView:
        """Return a single published exhibition.

        Raises:
            ExhibitionNotFoundError: If it does not exist or is not published.
        """
        parsed_id = parse_id(ExhibitionId, exhibition_id, "exhibition_id")
        exhibition = await self._exhibitions.find_published_by_id(parsed_id)
        views = await self._join([exhibition]) if exhibition is not None else []
        if not views:
            raise ExhibitionNotFoundError(str(parsed_id))
        return views[0]

    async def category_counts(self) -> list[CategoryCount]:
        """Return the number of published exhibitions for every category."""
        counts = {row.category: row.count for row in await self._exhibitions.find_category_counts()}
        return [
            CategoryCount(category=category, count=counts.get(category, 0))
            for category in Category
        ]

    async def _join(self, exhibitions: list[Exhibition]) -> list[PublicExhibitionView]:
        """Attach information and AR designs, fetching each kind in one call."""
        information_ids = list(
            dict.fromkeys(e.information_id for e in exhibitions if e.information_id is not None)
        )
        informations = {
            info.id: info for info in await self._informations.find_by_ids(information_ids)
        }

        ar_design_ids = list(
            dict.fromkeys(
                info.ar_design_id
                for info in informations.values()
                if info.ar_design_id is not None
            )
        )
        ar_designs = (
            {design.id: design for design in await self._ar_designs.find_by_ids(ar_design_ids)}
            if ar_design_ids
            else {}
        )

        views = []
        for exhibition in exhibitions:
            information = informations.get(exhibition.information_id)
            if information is None:
                logger.warning(
                    "Published exhibition %s has no information record", exhibition.id
                )
                continue
            views.append(
                PublicExhibitionView(
                    id=exhibition.id,
                    information=information,
                    ar_design=ar_designs.get(information.ar_design_id),
                    published_at=exhibition.published_at,
                )
            )
        return views
