"""Domain error codes for the exhibitions module."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Error categories the presentation boundary maps to stable statuses."""

    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"
    VALIDATION = "VALIDATION"
    UNAUTHORIZED = "UNAUTHORIZED"


class ErrorCode(Enum):
    """Domain error codes."""

    EXHIBITION_NOT_FOUND = "EXHIBITION_NOT_FOUND"
    EXHIBITION_INFORMATION_NOT_FOUND = "EXHIBITION_INFORMATION_NOT_FOUND"
    AR_DESIGN_NOT_FOUND = "AR_DESIGN_NOT_FOUND"
    IMAGE_NOT_FOUND = "IMAGE_NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    EXHIBITION_ALREADY_EXISTS = "EXHIBITION_ALREADY_EXISTS"
    EXHIBITOR_NAME_TAKEN = "EXHIBITOR_NAME_TAKEN"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    INFORMATION_REQUIRED = "INFORMATION_REQUIRED"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_IMAGE = "INVALID_IMAGE"
    INVALID_ID = "INVALID_ID"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    kind: ClassVar[ErrorKind]

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class ForbiddenError(DomainError):
    kind = ErrorKind.FORBIDDEN


class ConflictError(DomainError):
    kind = ErrorKind.CONFLICT


class ValidationError(DomainError):
    kind = ErrorKind.VALIDATION


class UnauthorizedError(DomainError):
    kind = ErrorKind.UNAUTHORIZED


class ExhibitionNotFoundError(NotFoundError):
    """Raised when an exhibition is not found."""

    def __init__(self, exhibition_id: str) -> None:
        super().__init__(
            code=ErrorCode.EXHIBITION_NOT_FOUND,
            message="Exhibition not found",
        )
        self.exhibition_id = exhibition_id


class ExhibitionInformationNotFoundError(NotFoundError):
    """Raised when an exhibition references information that does not exist."""

    def __init__(self, information_id: str) -> None:
        super().__init__(
            code=ErrorCode.EXHIBITION_INFORMATION_NOT_FOUND,
            message="Exhibition information not found",
        )
        self.information_id = information_id


class ArDesignNotFoundError(NotFoundError):
    """Raised when a referenced AR design does not exist."""

    def __init__(self, ar_design_id: str) -> None:
        super().__init__(
            code=ErrorCode.AR_DESIGN_NOT_FOUND,
            message="AR design not found",
        )
        self.ar_design_id = ar_design_id


class ImageNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.IMAGE_NOT_FOUND,
            message="Image not found",
        )


class ExhibitionForbiddenError(ForbiddenError):
    """Raised when the caller does not own the exhibition."""

    def __init__(self, exhibition_id: str) -> None:
        super().__init__(
            code=ErrorCode.FORBIDDEN,
            message="You do not have permission to access this exhibition",
        )
        self.exhibition_id = exhibition_id


class ExhibitionAlreadyExistsError(ConflictError):
    """Raised when an exhibitor already registered their exhibition information."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EXHIBITION_ALREADY_EXISTS,
            message="Exhibition information is already registered for this exhibitor",
        )


class ExhibitorNameTakenError(ConflictError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EXHIBITOR_NAME_TAKEN,
            message="Exhibitor name is already taken",
        )


class InvalidTransitionError(ConflictError):
    """Raised when a lifecycle operation is not allowed from the current state."""

    def __init__(self, transition: str, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TRANSITION, message=message)
        self.transition = transition


class InformationRequiredError(ValidationError):
    """Raised when an exhibition without information is published or edited."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INFORMATION_REQUIRED,
            message="Exhibition information must be registered first",
        )


class FieldValidationError(ValidationError):
    """Raised when a field violates its bounds."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_FIELD, message=message)
        self.field = field


class ImagePolicyError(ValidationError):
    """Raised when image bytes are too large or of an unsupported type."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_IMAGE, message=message)


class InvalidIdError(ValidationError):
    """Raised when an identifier is not a valid UUID."""

    def __init__(self, field: str = "id") -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message="Invalid ID format",
        )
        self.field = field


class InvalidCredentialsError(UnauthorizedError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CREDENTIALS,
            message="Authentication failed",
        )


class InvalidTokenError(UnauthorizedError):
    """Raised when a bearer token is missing, malformed or expired."""

    def __init__(self, message: str = "Authentication token is missing or invalid") -> None:
        super().__init__(code=ErrorCode.INVALID_TOKEN, message=message)
