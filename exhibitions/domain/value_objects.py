"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

T = TypeVar("T")


@dataclass(frozen=True)
class _Identifier:
    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ExhibitorId(_Identifier):
    """Unique identifier for an Exhibitor."""


@dataclass(frozen=True)
class ExhibitionId(_Identifier):
    """Unique identifier for an Exhibition."""


@dataclass(frozen=True)
class ExhibitionInformationId(_Identifier):
    """Unique identifier for an ExhibitionInformation record."""


@dataclass(frozen=True)
class ArDesignId(_Identifier):
    """Unique identifier for an ArDesign."""


class Category(Enum):
    """Exhibition categories shown on the public listing."""

    FOOD = "Food"
    EXHIBITION = "Exhibition"
    EXPERIENCE = "Experience"
    STAGE = "Stage"

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        return [(member.value, member.value) for member in cls]


class Keep:
    """Field was omitted from an update and keeps its current value."""

    _instance = None

    def __new__(cls) -> "Keep":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "KEEP"


class Clear:
    """Field was explicitly set to null and is cleared."""

    _instance = None

    def __new__(cls) -> "Clear":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CLEAR"


@dataclass(frozen=True)
class SetTo(Generic[T]):
    """Field is replaced with a new value."""

    value: T


KEEP = Keep()
CLEAR = Clear()

FieldUpdate = Keep | Clear | SetTo
