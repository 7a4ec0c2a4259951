"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every method is a
coroutine; callers await each store call in sequence.
"""

from abc import ABC, abstractmethod

from exhibitions.domain import (
    ArDesign,
    ArDesignId,
    CategoryCount,
    Exhibition,
    ExhibitionId,
    ExhibitionInformation,
    ExhibitionInformationId,
    Exhibitor,
    ExhibitorId,
    Page,
    PublishedQuery,
)


class ExhibitionStore(ABC):
    """Interface for exhibition persistence operations."""

    @abstractmethod
    async def save(self, exhibition: Exhibition) -> None:
        """Insert or update an exhibition."""
        ...

    @abstractmethod
    async def find_by_id(self, exhibition_id: ExhibitionId) -> Exhibition | None:
        """Return an exhibition by ID, or None if not found."""
        ...

    @abstractmethod
    async def find_by_exhibitor_id(self, exhibitor_id: ExhibitorId) -> list[Exhibition]:
        """Return all exhibitions owned by an exhibitor."""
        ...

    @abstractmethod
    async def delete(self, exhibition_id: ExhibitionId) -> None:
        """Delete an exhibition. Deleting a missing exhibition is a no-op."""
        ...

    @abstractmethod
    async def find_published(self, query: PublishedQuery) -> Page[Exhibition]:
        """Return published exhibitions with information, newest first."""
        ...

    @abstractmethod
    async def find_published_by_id(self, exhibition_id: ExhibitionId) -> Exhibition | None:
        """Return an exhibition only if it is published and has information."""
        ...

    @abstractmethod
    async def find_category_counts(self) -> list[CategoryCount]:
        """Return the number of published exhibitions per category.

        Categories without published exhibitions may be omitted.
        """
        ...


class ExhibitionInformationStore(ABC):
    """Interface for exhibition information persistence operations."""

    @abstractmethod
    async def save(self, information: ExhibitionInformation) -> None:
        """Insert or update an information record.

        Raises:
            ExhibitionAlreadyExistsError: If another record exists for the
                same exhibitor.
        """
        ...

    @abstractmethod
    async def find_by_id(
        self, information_id: ExhibitionInformationId
    ) -> ExhibitionInformation | None:
        ...

    @abstractmethod
    async def find_by_ids(
        self, information_ids: list[ExhibitionInformationId]
    ) -> list[ExhibitionInformation]:
        """Return the records that exist among the given IDs, in no particular order."""
        ...

    @abstractmethod
    async def find_by_exhibitor_id(
        self, exhibitor_id: ExhibitorId
    ) -> list[ExhibitionInformation]:
        ...

    @abstractmethod
    async def delete(self, information_id: ExhibitionInformationId) -> None:
        ...


class ArDesignStore(ABC):
    """Read-only access to AR design reference data."""

    @abstractmethod
    async def find_by_id(self, ar_design_id: ArDesignId) -> ArDesign | None:
        ...

    @abstractmethod
    async def find_by_ids(self, ar_design_ids: list[ArDesignId]) -> list[ArDesign]:
        ...

    @abstractmethod
    async def find_all(self) -> list[ArDesign]:
        ...


class ExhibitorStore(ABC):
    """Interface for exhibitor account persistence."""

    @abstractmethod
    async def save(self, exhibitor: Exhibitor) -> None:
        """Insert or update an exhibitor.

        Raises:
            ExhibitorNameTakenError: If the name belongs to another exhibitor.
        """
        ...

    @abstractmethod
    async def find_by_id(self, exhibitor_id: ExhibitorId) -> Exhibitor | None:
        ...

    @abstractmethod
    async def find_by_name(self, name: str) -> Exhibitor | None:
        ...
