"""Creation and partial update of ExhibitionInformation records."""

from dataclasses import dataclass, replace
from datetime import datetime

from exhibitions.domain.errors import FieldValidationError
from exhibitions.domain.models import ExhibitionInformation
from exhibitions.domain.value_objects import (
    KEEP,
    ArDesignId,
    Category,
    Clear,
    ExhibitionInformationId,
    ExhibitorId,
    FieldUpdate,
    Keep,
    SetTo,
)

EXHIBITOR_NAME_MAX_LENGTH = 100
TITLE_MAX_LENGTH = 200
LOCATION_MAX_LENGTH = 100
COMMENT_MAX_LENGTH = 100

# Fields that may be cleared with an explicit null.
NULLABLE_FIELDS = frozenset({"price", "required_time", "comment", "ar_design_id", "image"})


@dataclass(frozen=True)
class InformationContent:
    """Everything needed to create an ExhibitionInformation record."""

    exhibitor_name: str
    title: str
    category: Category | str
    location: str
    price: int | None = None
    required_time: int | None = None
    comment: str | None = None
    ar_design_id: ArDesignId | None = None
    image: bytes | None = None


@dataclass(frozen=True)
class InformationUpdate:
    """Per-field changes; omitted fields keep their current value."""

    exhibitor_name: FieldUpdate = KEEP
    title: FieldUpdate = KEEP
    category: FieldUpdate = KEEP
    location: FieldUpdate = KEEP
    price: FieldUpdate = KEEP
    required_time: FieldUpdate = KEEP
    comment: FieldUpdate = KEEP
    ar_design_id: FieldUpdate = KEEP
    image: FieldUpdate = KEEP

    def changed_fields(self) -> list[str]:
        return [
            name
            for name in self.__dataclass_fields__
            if not isinstance(getattr(self, name), Keep)
        ]


def _required_text(field: str, value: object, max_length: int) -> str:
    if not isinstance(value, str):
        raise FieldValidationError(field, f"{field} must be a string")
    value = value.strip()
    if not value:
        raise FieldValidationError(field, f"{field} is required")
    if len(value) > max_length:
        raise FieldValidationError(
            field, f"{field} must be {max_length} characters or less"
        )
    return value


def validate_exhibitor_name(value: object) -> str:
    return _required_text("exhibitor_name", value, EXHIBITOR_NAME_MAX_LENGTH)


def validate_title(value: object) -> str:
    return _required_text("title", value, TITLE_MAX_LENGTH)


def validate_location(value: object) -> str:
    return _required_text("location", value, LOCATION_MAX_LENGTH)


def validate_category(value: object) -> Category:
    if isinstance(value, Category):
        return value
    try:
        return Category(value)
    except ValueError:
        allowed = ", ".join(c.value for c in Category)
        raise FieldValidationError("category", f"category must be one of: {allowed}") from None


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_price(value: object) -> int | None:
    if value is None:
        return None
    if not _is_int(value) or value < 0:
        raise FieldValidationError("price", "price must be an integer of 0 or greater")
    return value


def validate_required_time(value: object) -> int | None:
    if value is None:
        return None
    if not _is_int(value) or value < 1:
        raise FieldValidationError(
            "required_time", "required_time must be an integer of 1 or greater"
        )
    return value


def validate_comment(value: object) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise FieldValidationError("comment", "comment must be a string")
    value = value.strip()
    if len(value) > COMMENT_MAX_LENGTH:
        raise FieldValidationError(
            "comment", f"comment must be {COMMENT_MAX_LENGTH} characters or less"
        )
    return value


def validate_image(value: object) -> bytes | None:
    if value is None:
        return None
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise FieldValidationError("image", "image must be binary data")
    return bytes(value)


def validate_ar_design_id(value: object) -> ArDesignId | None:
    if value is None or isinstance(value, ArDesignId):
        return value
    raise FieldValidationError("ar_design_id", "ar_design_id must be an AR design ID")


_VALIDATORS = {
    "exhibitor_name": validate_exhibitor_name,
    "title": validate_title,
    "category": validate_category,
    "location": validate_location,
    "price": validate_price,
    "required_time": validate_required_time,
    "comment": validate_comment,
    "ar_design_id": validate_ar_design_id,
    "image": validate_image,
}


def create_information(
    exhibitor_id: ExhibitorId, content: InformationContent, now: datetime
) -> ExhibitionInformation:
    """Build a new validated ExhibitionInformation record.

    Uniqueness per exhibitor is checked by the caller.

    Raises:
        FieldValidationError: If any field is out of bounds.
    """
    values = {name: validator(getattr(content, name)) for name, validator in _VALIDATORS.items()}
    return ExhibitionInformation(
        id=ExhibitionInformationId.new(),
        exhibitor_id=exhibitor_id,
        created_at=now,
        updated_at=now,
        **values,
    )


def update_information(
    existing: ExhibitionInformation, changes: InformationUpdate, now: datetime
) -> ExhibitionInformation:
    """Apply per-field changes and refresh updated_at.

    Raises:
        FieldValidationError: If a changed field is out of bounds, or a
            required field is cleared.
    """
    values = {}
    for name, validator in _VALIDATORS.items():
        change = getattr(changes, name)
        if isinstance(change, Keep):
            continue
        if isinstance(change, Clear):
            if name not in NULLABLE_FIELDS:
                raise FieldValidationError(name, f"{name} is required")
            values[name] = None
        elif isinstance(change, SetTo):
            values[name] = validator(change.value)
        else:
            raise TypeError(f"Unsupported update for {name}: {change!r}")
    return replace(existing, updated_at=now, **values)
