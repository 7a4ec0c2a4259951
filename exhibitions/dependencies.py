"""Wiring of services to their Django-backed stores."""

from datetime import timedelta

from django.conf import settings

from exhibitions.services import (
    ExhibitionService,
    ExhibitorService,
    PublicExhibitionService,
    TokenIssuer,
)
from exhibitions.stores.django_store import (
    DjangoArDesignStore,
    DjangoExhibitionInformationStore,
    DjangoExhibitionStore,
    DjangoExhibitorStore,
)


def get_token_issuer() -> TokenIssuer:
    return TokenIssuer(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        ttl=timedelta(minutes=settings.JWT_TTL_MINUTES),
    )


def get_exhibition_service() -> ExhibitionService:
    return ExhibitionService(
        exhibitions=DjangoExhibitionStore(),
        informations=DjangoExhibitionInformationStore(),
        ar_designs=DjangoArDesignStore(),
    )


def get_public_exhibition_service() -> PublicExhibitionService:
    return PublicExhibitionService(
        exhibitions=DjangoExhibitionStore(),
        informations=DjangoExhibitionInformationStore(),
        ar_designs=DjangoArDesignStore(),
    )


def get_exhibitor_service() -> ExhibitorService:
    return ExhibitorService(store=DjangoExhibitorStore(), tokens=get_token_issuer())
