from exhibitions.handlers.views import (
    ArDesignListView,
    ExhibitionCreateView,
    ExhibitionDetailView,
    ExhibitionImageView,
    ExhibitionInformationView,
    ExhibitionTransitionView,
    ExhibitorLoginView,
    ExhibitorLogoutView,
    ExhibitorRegisterView,
    HealthView,
    MyExhibitionView,
    PublicCategoryCountView,
    PublicExhibitionDetailView,
    PublicExhibitionListView,
)

__all__ = [
    "ArDesignListView",
    "ExhibitionCreateView",
    "ExhibitionDetailView",
    "ExhibitionImageView",
    "ExhibitionInformationView",
    "ExhibitionTransitionView",
    "ExhibitorLoginView",
    "ExhibitorLogoutView",
    "ExhibitorRegisterView",
    "HealthView",
    "MyExhibitionView",
    "PublicCategoryCountView",
    "PublicExhibitionDetailView",
    "PublicExhibitionListView",
]
