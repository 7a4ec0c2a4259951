from django.urls import path

from exhibitions.handlers import (
    ArDesignListView,
    ExhibitionCreateView,
    ExhibitionDetailView,
    ExhibitionImageView,
    ExhibitionInformationView,
    ExhibitionTransitionView,
    ExhibitorLoginView,
    ExhibitorLogoutView,
    ExhibitorRegisterView,
    MyExhibitionView,
    PublicCategoryCountView,
    PublicExhibitionDetailView,
    PublicExhibitionListView,
)

urlpatterns = [
    path("exhibitors", ExhibitorRegisterView.as_view(), name="exhibitor-register"),
    path("exhibitors/login", ExhibitorLoginView.as_view(), name="exhibitor-login"),
    path("exhibitors/logout", ExhibitorLogoutView.as_view(), name="exhibitor-logout"),
    path("ar-designs", ArDesignListView.as_view(), name="ar-design-list"),
    path("exhibitions", ExhibitionCreateView.as_view(), name="exhibition-create"),
    path("exhibitions/me", MyExhibitionView.as_view(), name="exhibition-mine"),
    path(
        "exhibitions/<str:exhibition_id>",
        ExhibitionDetailView.as_view(),
        name="exhibition-detail",
    ),
    path(
        "exhibitions/<str:exhibition_id>/information",
        ExhibitionInformationView.as_view(),
        name="exhibition-information",
    ),
    path(
        "exhibitions/<str:exhibition_id>/publish",
        ExhibitionTransitionView.as_view(transition="publish"),
        name="exhibition-publish",
    ),
    path(
        "exhibitions/<str:exhibition_id>/unpublish",
        ExhibitionTransitionView.as_view(transition="unpublish"),
        name="exhibition-unpublish",
    ),
    path(
        "exhibitions/<str:exhibition_id>/draft",
        ExhibitionTransitionView.as_view(transition="draft"),
        name="exhibition-draft",
    ),
    path(
        "exhibitions/<str:exhibition_id>/image",
        ExhibitionImageView.as_view(),
        name="exhibition-image",
    ),
    path(
        "public/exhibitions",
        PublicExhibitionListView.as_view(),
        name="public-exhibition-list",
    ),
    path(
        "public/exhibitions/categories",
        PublicCategoryCountView.as_view(),
        name="public-exhibition-categories",
    ),
    path(
        "public/exhibitions/<str:exhibition_id>",
        PublicExhibitionDetailView.as_view(),
        name="public-exhibition-detail",
    ),
]
