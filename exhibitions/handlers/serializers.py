"""Serializers for parsing requests and rendering domain models.

Input serializers check request shape only; field bounds are enforced by the
domain so that every entry point reports the same errors.
"""

import base64
import binascii

from rest_framework import serializers

from exhibitions.domain import CLEAR, KEEP, ArDesignId, SetTo
from exhibitions.domain.errors import ImagePolicyError
from exhibitions.domain.images import MAX_IMAGE_BYTES, check_image_policy
from exhibitions.domain.information import InformationContent, InformationUpdate


def encode_image(data: bytes | None) -> str | None:
    if data is None:
        return None
    return base64.b64encode(data).decode("ascii")


def _checked_image(data: bytes) -> bytes:
    try:
        check_image_policy(data)
    except ImagePolicyError as exc:
        raise serializers.ValidationError(exc.message, code="invalid_image") from None
    return data


class Base64ImageField(serializers.Field):
    """Image bytes transported as a base64 string."""

    default_error_messages = {
        "invalid": "Image must be a base64 encoded string.",
    }

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        try:
            decoded = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError):
            self.fail("invalid")
        return _checked_image(decoded)

    def to_representation(self, value):
        return encode_image(value)


# Input


class ExhibitorCredentialsSerializer(serializers.Serializer):
    name = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class ExhibitionInformationInputSerializer(serializers.Serializer):
    """Create payload, or a partial update payload when ``partial=True``.

    On a partial update an absent key keeps the stored value and an explicit
    null clears it.
    """

    exhibitor_name = serializers.CharField(trim_whitespace=False)
    title = serializers.CharField(trim_whitespace=False)
    category = serializers.CharField()
    location = serializers.CharField(trim_whitespace=False)
    price = serializers.IntegerField(required=False, allow_null=True)
    required_time = serializers.IntegerField(required=False, allow_null=True)
    comment = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    ar_design_id = serializers.UUIDField(required=False, allow_null=True)
    image = Base64ImageField(required=False, allow_null=True)

    def to_content(self) -> InformationContent:
        data = dict(self.validated_data)
        if data.get("ar_design_id") is not None:
            data["ar_design_id"] = ArDesignId(data["ar_design_id"])
        return InformationContent(**data)

    def to_update(self) -> InformationUpdate:
        changes = {}
        for name, value in self.validated_data.items():
            if value is None:
                changes[name] = CLEAR
            elif name == "ar_design_id":
                changes[name] = SetTo(ArDesignId(value))
            else:
                changes[name] = SetTo(value)
        return InformationUpdate(**{name: changes.get(name, KEEP) for name in self.fields})


class ImageUploadSerializer(serializers.Serializer):
    image = serializers.FileField()

    def validate_image(self, value):
        if value.size > MAX_IMAGE_BYTES:
            raise serializers.ValidationError(
                "Image must be 5MB or smaller", code="invalid_image"
            )
        return _checked_image(value.read())


class PublicExhibitionQuerySerializer(serializers.Serializer):
    category = serializers.CharField(required=False, allow_blank=True)
    search = serializers.CharField(required=False, allow_blank=True)
    page = serializers.IntegerField(required=False, default=1)
    per_page = serializers.IntegerField(required=False, default=20)


# Output


class ExhibitorSerializer(serializers.Serializer):
    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class AuthResultSerializer(serializers.Serializer):
    token = serializers.CharField()
    exhibitor = ExhibitorSerializer()


class ArDesignSerializer(serializers.Serializer):
    id = serializers.UUIDField(source="id.value")
    url = serializers.CharField(allow_null=True)


class ExhibitionInformationSerializer(serializers.Serializer):
    """Serializer for ExhibitionInformation domain model."""

    id = serializers.UUIDField(source="id.value")
    exhibitor_id = serializers.UUIDField(source="exhibitor_id.value")
    exhibitor_name = serializers.CharField()
    title = serializers.CharField()
    category = serializers.CharField(source="category.value")
    location = serializers.CharField()
    price = serializers.IntegerField(allow_null=True)
    required_time = serializers.IntegerField(allow_null=True)
    comment = serializers.CharField(allow_null=True)
    ar_design_id = serializers.UUIDField(source="ar_design_id.value", allow_null=True)
    image = Base64ImageField(allow_null=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ExhibitionSerializer(serializers.Serializer):
    """Serializer for ExhibitionView: an exhibition joined with its content."""

    id = serializers.UUIDField(source="exhibition.id.value")
    exhibitor_id = serializers.UUIDField(source="exhibition.exhibitor_id.value")
    exhibition_information_id = serializers.UUIDField(
        source="exhibition.information_id.value", allow_null=True
    )
    exhibition_information = ExhibitionInformationSerializer(
        source="information", allow_null=True
    )
    ar_design = ArDesignSerializer(allow_null=True)
    status = serializers.CharField(source="exhibition.status.value")
    is_draft = serializers.BooleanField(source="exhibition.is_draft")
    is_published = serializers.BooleanField(source="exhibition.is_published")
    published_at = serializers.DateTimeField(source="exhibition.published_at", allow_null=True)
    created_at = serializers.DateTimeField(source="exhibition.created_at")
    updated_at = serializers.DateTimeField(source="exhibition.updated_at")


class PublicExhibitionSerializer(serializers.Serializer):
    """Serializer for PublicExhibitionView."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField(source="information.title")
    category = serializers.CharField(source="information.category.value")
    exhibitor_name = serializers.CharField(source="information.exhibitor_name")
    location = serializers.CharField(source="information.location")
    price = serializers.IntegerField(source="information.price", allow_null=True)
    required_time = serializers.IntegerField(
        source="information.required_time", allow_null=True
    )
    comment = serializers.CharField(source="information.comment", allow_null=True)
    ar_design = ArDesignSerializer(allow_null=True)
    image = Base64ImageField(source="information.image", allow_null=True)
    published_at = serializers.DateTimeField(allow_null=True)


class CategoryCountSerializer(serializers.Serializer):
    category = serializers.CharField(source="category.value")
    count = serializers.IntegerField()


def page_data(page, serializer_class) -> dict:
    return {
        "data": serializer_class(page.items, many=True).data,
        "meta": {
            "total": page.total,
            "page": page.page,
            "per_page": page.per_page,
            "total_pages": page.total_pages,
        },
    }
