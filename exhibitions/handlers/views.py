"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses (see handlers/errors.py)
- Never contain business logic
- Never expose internal error details

Services are coroutines; views are synchronous DRF views and drive them with
``async_to_sync`` so ORM calls run on the request thread.
"""

import logging

from asgiref.sync import async_to_sync
from django.core.cache import cache
from django.http import HttpResponse
from rest_framework import status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from exhibitions import cache as public_cache
from exhibitions.dependencies import (
    get_exhibition_service,
    get_exhibitor_service,
    get_public_exhibition_service,
)
from exhibitions.domain.errors import ExhibitionNotFoundError
from exhibitions.handlers.authentication import ExhibitorTokenAuthentication
from exhibitions.handlers.serializers import (
    ArDesignSerializer,
    AuthResultSerializer,
    CategoryCountSerializer,
    ExhibitionInformationInputSerializer,
    ExhibitionSerializer,
    ExhibitorCredentialsSerializer,
    ImageUploadSerializer,
    PublicExhibitionQuerySerializer,
    PublicExhibitionSerializer,
    page_data,
)

logger = logging.getLogger(__name__)


class ExhibitorAPIView(APIView):
    """Base view for endpoints that act on behalf of an authenticated exhibitor."""

    authentication_classes = [ExhibitorTokenAuthentication]

    def exhibitor_id(self, request: Request) -> str:
        return str(request.user.id)


class PublicAPIView(APIView):
    authentication_classes: list = []


class HealthView(PublicAPIView):
    """Handler for GET /health"""

    def get(self, request: Request) -> Response:
        return Response({"status": "ok"})


# Exhibitors


class ExhibitorRegisterView(PublicAPIView):
    """Handler for POST /api/exhibitors"""

    def post(self, request: Request) -> Response:
        serializer = ExhibitorCredentialsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = async_to_sync(get_exhibitor_service().register)(
            serializer.validated_data["name"], serializer.validated_data["password"]
        )
        return Response(AuthResultSerializer(result).data, status=status.HTTP_201_CREATED)


class ExhibitorLoginView(PublicAPIView):
    """Handler for POST /api/exhibitors/login"""

    def post(self, request: Request) -> Response:
        serializer = ExhibitorCredentialsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = async_to_sync(get_exhibitor_service().login)(
            serializer.validated_data["name"], serializer.validated_data["password"]
        )
        return Response(AuthResultSerializer(result).data)


class ExhibitorLogoutView(ExhibitorAPIView):
    """Handler for POST /api/exhibitors/logout

    Tokens are stateless, so there is nothing to revoke; the client drops its
    token. Authentication still applies so a bad token gets a 401.
    """

    def post(self, request: Request) -> Response:
        logger.info("Exhibitor %s logged out", self.exhibitor_id(request))
        return Response(status=status.HTTP_204_NO_CONTENT)


class ArDesignListView(ExhibitorAPIView):
    """Handler for GET /api/ar-designs"""

    def get(self, request: Request) -> Response:
        designs = async_to_sync(get_exhibition_service().list_ar_designs)()
        return Response({"data": ArDesignSerializer(designs, many=True).data})


# Exhibitions (owner only)


class ExhibitionCreateView(ExhibitorAPIView):
    """Handler for POST /api/exhibitions"""

    def post(self, request: Request) -> Response:
        serializer = ExhibitionInformationInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        view = async_to_sync(get_exhibition_service().create)(
            self.exhibitor_id(request), serializer.to_content()
        )
        return Response(ExhibitionSerializer(view).data, status=status.HTTP_201_CREATED)


class MyExhibitionView(ExhibitorAPIView):
    """Handler for GET /api/exhibitions/me"""

    def get(self, request: Request) -> Response:
        view = async_to_sync(get_exhibition_service().get_mine)(self.exhibitor_id(request))
        if view is None:
            raise ExhibitionNotFoundError("me")
        return Response(ExhibitionSerializer(view).data)


class ExhibitionDetailView(ExhibitorAPIView):
    """Handler for GET and DELETE /api/exhibitions/{exhibition_id}"""

    def get(self, request: Request, exhibition_id: str) -> Response:
        view = async_to_sync(get_exhibition_service().get)(
            exhibition_id, self.exhibitor_id(request)
        )
        return Response(ExhibitionSerializer(view).data)

    def delete(self, request: Request, exhibition_id: str) -> Response:
        async_to_sync(get_exhibition_service().delete)(exhibition_id, self.exhibitor_id(request))
        return Response(status=status.HTTP_204_NO_CONTENT)


class ExhibitionInformationView(ExhibitorAPIView):
    """Handler for PATCH /api/exhibitions/{exhibition_id}/information"""

    def patch(self, request: Request, exhibition_id: str) -> Response:
        serializer = ExhibitionInformationInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        view = async_to_sync(get_exhibition_service().update_information)(
            exhibition_id, self.exhibitor_id(request), serializer.to_update()
        )
        return Response(ExhibitionSerializer(view).data)


class ExhibitionTransitionView(ExhibitorAPIView):
    """Handler for POST /api/exhibitions/{exhibition_id}/{publish,unpublish,draft}"""

    transition = None

    def post(self, request: Request, exhibition_id: str) -> Response:
        operation = getattr(get_exhibition_service(), self.transition)
        view = async_to_sync(operation)(exhibition_id, self.exhibitor_id(request))
        return Response(ExhibitionSerializer(view).data)


class ExhibitionImageView(ExhibitorAPIView):
    """Handler for GET, PUT and DELETE /api/exhibitions/{exhibition_id}/image"""

    parser_classes = [MultiPartParser, FormParser]

    def get(self, request: Request, exhibition_id: str) -> HttpResponse:
        image = async_to_sync(get_exhibition_service().get_image)(
            exhibition_id, self.exhibitor_id(request)
        )
        return HttpResponse(image.data, content_type=image.content_type)

    def put(self, request: Request, exhibition_id: str) -> Response:
        serializer = ImageUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        async_to_sync(get_exhibition_service().upload_image)(
            exhibition_id, self.exhibitor_id(request), serializer.validated_data["image"]
        )
        return Response(status=status.HTTP_204_NO_CONTENT)

    def delete(self, request: Request, exhibition_id: str) -> Response:
        async_to_sync(get_exhibition_service().delete_image)(
            exhibition_id, self.exhibitor_id(request)
        )
        return Response(status=status.HTTP_204_NO_CONTENT)


# Public listing (cached)


class PublicExhibitionListView(PublicAPIView):
    """Handler for GET /api/public/exhibitions"""

    def get(self, request: Request) -> Response:
        query = PublicExhibitionQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        key = public_cache.public_list_key(
            params.get("category"), params.get("search"), params["page"], params["per_page"]
        )
        data = cache.get(key)
        if data is None:
            page = async_to_sync(get_public_exhibition_service().list_published)(
                category=params.get("category") or None,
                search=params.get("search") or None,
                page=params["page"],
                per_page=params["per_page"],
            )
            data = page_data(page, PublicExhibitionSerializer)
            cache.set(key, data, public_cache.cache_ttl())
        return Response(data)


class PublicExhibitionDetailView(PublicAPIView):
    """Handler for GET /api/public/exhibitions/{exhibition_id}"""

    def get(self, request: Request, exhibition_id: str) -> Response:
        key = public_cache.public_detail_key(exhibition_id)
        data = cache.get(key)
        if data is None:
            view = async_to_sync(get_public_exhibition_service().get_published)(exhibition_id)
            data = PublicExhibitionSerializer(view).data
            cache.set(key, data, public_cache.cache_ttl())
        return Response(data)


class PublicCategoryCountView(PublicAPIView):
    """Handler for GET /api/public/exhibitions/categories"""

    def get(self, request: Request) -> Response:
        key = public_cache.category_counts_key()
        data = cache.get(key)
        if data is None:
            counts = async_to_sync(get_public_exhibition_service().category_counts)()
            data = {"data": CategoryCountSerializer(counts, many=True).data}
            cache.set(key, data, public_cache.cache_ttl())
        return Response(data)
