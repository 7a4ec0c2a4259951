from exhibitions.domain.models import (
    ArDesign,
    CategoryCount,
    Exhibition,
    ExhibitionImage,
    ExhibitionInformation,
    ExhibitionStatus,
    ExhibitionView,
    Exhibitor,
    Page,
    PublicExhibitionView,
    PublishedQuery,
)
from exhibitions.domain.value_objects import (
    CLEAR,
    KEEP,
    ArDesignId,
    Category,
    ExhibitionId,
    ExhibitionInformationId,
    ExhibitorId,
    SetTo,
)

__all__ = [
    "ArDesign",
    "CategoryCount",
    "Exhibition",
    "ExhibitionImage",
    "ExhibitionInformation",
    "ExhibitionStatus",
    "ExhibitionView",
    "Exhibitor",
    "Page",
    "PublicExhibitionView",
    "PublishedQuery",
    "ArDesignId",
    "Category",
    "ExhibitionId",
    "ExhibitionInformationId",
    "ExhibitorId",
    "KEEP",
    "CLEAR",
    "SetTo",
]
