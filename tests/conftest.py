"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from exhibitions.domain import (
    ArDesign,
    ArDesignId,
    Category,
    CategoryCount,
    ExhibitionStatus,
    Exhibitor,
    ExhibitorId,
    Page,
)
from exhibitions.domain.errors import ExhibitionAlreadyExistsError, ExhibitorNameTakenError
from exhibitions.domain.information import InformationContent
from exhibitions.services import (
    ExhibitionService,
    ExhibitorService,
    PublicExhibitionService,
    TokenIssuer,
)
from exhibitions.stores.interfaces import (
    ArDesignStore,
    ExhibitionInformationStore,
    ExhibitionStore,
    ExhibitorStore,
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 32
GIF_BYTES = b"GIF89a" + b"\x00" * 32


class StoreFailure(RuntimeError):
    """Simulated storage failure."""


class _FailureInjection:
    def __init__(self) -> None:
        self.fail_on: set[str] = set()

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.fail_on:
            raise StoreFailure(f"{type(self).__name__}.{operation} failed")


class InMemoryExhibitionInformationStore(_FailureInjection, ExhibitionInformationStore):
    def __init__(self) -> None:
        super().__init__()
        self.rows = {}

    async def save(self, information):
        self._maybe_fail("save")
        for row in self.rows.values():
            if row.exhibitor_id == information.exhibitor_id and row.id != information.id:
                raise ExhibitionAlreadyExistsError()
        self.rows[information.id] = information

    async def find_by_id(self, information_id):
        return self.rows.get(information_id)

    async def find_by_ids(self, information_ids):
        return [self.rows[i] for i in information_ids if i in self.rows]

    async def find_by_exhibitor_id(self, exhibitor_id):
        return [row for row in self.rows.values() if row.exhibitor_id == exhibitor_id]

    async def delete(self, information_id):
        self._maybe_fail("delete")
        self.rows.pop(information_id, None)


class InMemoryExhibitionStore(_FailureInjection, ExhibitionStore):
    def __init__(self, informations: InMemoryExhibitionInformationStore) -> None:
        super().__init__()
        self.rows = {}
        self._informations = informations

    async def save(self, exhibition):
        self._maybe_fail("save")
        self.rows[exhibition.id] = exhibition

    async def find_by_id(self, exhibition_id):
        return self.rows.get(exhibition_id)

    async def find_by_exhibitor_id(self, exhibitor_id):
        owned = [row for row in self.rows.values() if row.exhibitor_id == exhibitor_id]
        return sorted(owned, key=lambda row: row.created_at)

    async def delete(self, exhibition_id):
        self._maybe_fail("delete")
        self.rows.pop(exhibition_id, None)

    def _published(self):
        for row in self.rows.values():
            if row.status is ExhibitionStatus.PUBLISHED and row.information_id is not None:
                yield row, self._informations.rows.get(row.information_id)

    async def find_published(self, query):
        matches = []
        for row, info in self._published():
            if query.category is not None and (info is None or info.category != query.category):
                continue
            if query.search:
                needle = query.search.lower()
                haystack = [info.title, info.exhibitor_name, info.comment or ""] if info else []
                if not any(needle in text.lower() for text in haystack):
                    continue
            matches.append(row)
        matches.sort(key=lambda row: row.published_at, reverse=True)
        window = matches[query.offset : query.offset + query.per_page]
        return Page(items=window, total=len(matches), page=query.page, per_page=query.per_page)

    async def find_published_by_id(self, exhibition_id):
        for row, _ in self._published():
            if row.id == exhibition_id:
                return row
        return None

    async def find_category_counts(self):
        counts = {}
        for _, info in self._published():
            if info is not None:
                counts[info.category] = counts.get(info.category, 0) + 1
        return [CategoryCount(category=c, count=n) for c, n in counts.items()]


class InMemoryArDesignStore(ArDesignStore):
    def __init__(self) -> None:
        self.rows = {}

    def add(self, url: str | None = "https://ar.example.com/marker.png") -> ArDesign:
        design = ArDesign(id=ArDesignId.new(), url=url)
        self.rows[design.id] = design
        return design

    async def find_by_id(self, ar_design_id):
        return self.rows.get(ar_design_id)

    async def find_by_ids(self, ar_design_ids):
        return [self.rows[i] for i in ar_design_ids if i in self.rows]

    async def find_all(self):
        return list(self.rows.values())


class InMemoryExhibitorStore(ExhibitorStore):
    def __init__(self) -> None:
        self.rows: dict = {}

    async def save(self, exhibitor: Exhibitor) -> None:
        for row in self.rows.values():
            if row.name == exhibitor.name and row.id != exhibitor.id:
                raise ExhibitorNameTakenError()
        self.rows[exhibitor.id] = exhibitor

    async def find_by_id(self, exhibitor_id):
        return self.rows.get(exhibitor_id)

    async def find_by_name(self, name):
        return next((row for row in self.rows.values() if row.name == name), None)


class FakeClock:
    """Deterministic clock that moves forward one second per call."""

    def __init__(self) -> None:
        self.current = datetime(2025, 11, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def information_store() -> InMemoryExhibitionInformationStore:
    return InMemoryExhibitionInformationStore()


@pytest.fixture
def exhibition_store(information_store) -> InMemoryExhibitionStore:
    return InMemoryExhibitionStore(information_store)


@pytest.fixture
def ar_design_store() -> InMemoryArDesignStore:
    return InMemoryArDesignStore()


@pytest.fixture
def exhibitor_store() -> InMemoryExhibitorStore:
    return InMemoryExhibitorStore()


@pytest.fixture
def service(exhibition_store, information_store, ar_design_store, clock) -> ExhibitionService:
    return ExhibitionService(
        exhibitions=exhibition_store,
        informations=information_store,
        ar_designs=ar_design_store,
        clock=clock,
    )


@pytest.fixture
def public_service(exhibition_store, information_store, ar_design_store) -> PublicExhibitionService:
    return PublicExhibitionService(
        exhibitions=exhibition_store,
        informations=information_store,
        ar_designs=ar_design_store,
    )


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(secret="test-secret")


@pytest.fixture
def exhibitor_service(exhibitor_store, token_issuer, clock) -> ExhibitorService:
    return ExhibitorService(store=exhibitor_store, tokens=token_issuer, clock=clock)


@pytest.fixture
def content():
    """Factory for valid InformationContent."""

    def make(**overrides) -> InformationContent:
        values = {
            "exhibitor_name": "Robotics Club",
            "title": "Line-following robots",
            "category": Category.EXHIBITION,
            "location": "Building A, Room 101",
            "price": None,
            "required_time": 15,
            "comment": "Try steering one yourself",
        }
        values.update(overrides)
        return InformationContent(**values)

    return make


@pytest.fixture
def exhibitor_client(db):
    """Factory for API clients authenticated as a freshly created exhibitor."""
    from django.utils import timezone as django_timezone

    from exhibitions import models
    from exhibitions.dependencies import get_token_issuer

    counter = iter(range(1000))

    def make(name: str | None = None) -> APIClient:
        now = django_timezone.now()
        row = models.Exhibitor.objects.create(
            name=name or f"Exhibitor {next(counter)}",
            password_hash="unused",
            created_at=now,
            updated_at=now,
        )
        token = get_token_issuer().issue(ExhibitorId(row.id))
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        client.exhibitor_id = str(row.id)
        return client

    return make
