"""Unit tests for ExhibitionService against in-memory stores.

These test ownership checks, the lifecycle, compensation between the two
writes of create and delete, and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import logging

import pytest
import pytest_asyncio

from exhibitions.domain import (
    CLEAR,
    ArDesignId,
    ExhibitionId,
    ExhibitionStatus,
    ExhibitorId,
    SetTo,
)
from exhibitions.domain.errors import (
    ArDesignNotFoundError,
    ExhibitionAlreadyExistsError,
    ExhibitionForbiddenError,
    ExhibitionInformationNotFoundError,
    ExhibitionNotFoundError,
    FieldValidationError,
    ImageNotFoundError,
    InformationRequiredError,
    InvalidIdError,
    InvalidTransitionError,
)
from exhibitions.domain import lifecycle
from exhibitions.domain.information import InformationUpdate

from conftest import GIF_BYTES, PNG_BYTES, StoreFailure

pytestmark = pytest.mark.asyncio


@pytest.fixture
def owner() -> str:
    return str(ExhibitorId.new())


@pytest.fixture
def stranger() -> str:
    return str(ExhibitorId.new())


@pytest_asyncio.fixture
async def created(service, owner, content):
    return await service.create(owner, content())


@pytest.fixture
def service_log(caplog, monkeypatch):
    """Capture ERROR records from the exhibitions loggers, which do not propagate."""
    monkeypatch.setattr(logging.getLogger("exhibitions"), "propagate", True)
    caplog.set_level(logging.ERROR, logger="exhibitions.services.exhibition_service")
    return caplog


class TestCreate:
    """Tests for ExhibitionService.create."""

    async def test_create_returns_draft_with_information(self, service, owner, content):
        view = await service.create(owner, content())
        assert view.exhibition.status is ExhibitionStatus.DRAFT
        assert view.exhibition.exhibitor_id == ExhibitorId.from_string(owner)
        assert view.exhibition.information_id == view.information.id
        assert view.information.title == "Line-following robots"
        assert view.ar_design is None

    async def test_create_twice_is_conflict(
        self, service, owner, content, created, information_store, exhibition_store
    ):
        """Given existing information, a second create fails and leaves the first untouched."""
        before = dict(information_store.rows)
        with pytest.raises(ExhibitionAlreadyExistsError):
            await service.create(owner, content(title="Another"))
        assert information_store.rows == before
        assert len(exhibition_store.rows) == 1

    async def test_create_with_unknown_ar_design(self, service, owner, content, information_store):
        with pytest.raises(ArDesignNotFoundError):
            await service.create(owner, content(ar_design_id=ArDesignId.new()))
        assert information_store.rows == {}

    async def test_create_with_ar_design(self, service, owner, content, ar_design_store):
        design = ar_design_store.add()
        view = await service.create(owner, content(ar_design_id=design.id))
        assert view.ar_design == design

    async def test_create_invalid_field(self, service, owner, content, information_store):
        with pytest.raises(FieldValidationError):
            await service.create(owner, content(title=""))
        assert information_store.rows == {}

    async def test_create_invalid_exhibitor_id(self, service, content):
        with pytest.raises(InvalidIdError):
            await service.create("not-a-uuid", content())

    async def test_failed_exhibition_write_removes_information(
        self, service, owner, content, information_store, exhibition_store
    ):
        """If the exhibition cannot be saved, the information written before it is deleted."""
        exhibition_store.fail_on.add("save")
        with pytest.raises(StoreFailure):
            await service.create(owner, content())
        assert information_store.rows == {}
        assert exhibition_store.rows == {}

    async def test_failed_cleanup_keeps_original_error(
        self, service, owner, content, information_store, exhibition_store, service_log
    ):
        """A failure while removing the information is logged; the save failure propagates."""
        exhibition_store.fail_on.add("save")
        information_store.fail_on.add("delete")
        with pytest.raises(StoreFailure, match="InMemoryExhibitionStore.save"):
            await service.create(owner, content())
        assert any("Removing information" in r.getMessage() for r in service_log.records)


class TestGet:
    async def test_get_own_exhibition(self, service, owner, created):
        view = await service.get(str(created.exhibition.id), owner)
        assert view.exhibition == created.exhibition
        assert view.information == created.information

    async def test_get_other_exhibitors_exhibition_is_forbidden(self, service, stranger, created):
        with pytest.raises(ExhibitionForbiddenError):
            await service.get(str(created.exhibition.id), stranger)

    async def test_get_missing_is_not_found(self, service, owner):
        with pytest.raises(ExhibitionNotFoundError):
            await service.get(str(ExhibitionId.new()), owner)

    async def test_missing_checked_before_ownership(self, service, stranger):
        """A missing exhibition is reported as not found even for a stranger."""
        with pytest.raises(ExhibitionNotFoundError):
            await service.get(str(ExhibitionId.new()), stranger)

    async def test_get_invalid_id(self, service, owner):
        with pytest.raises(InvalidIdError) as exc_info:
            await service.get("nope", owner)
        assert exc_info.value.field == "exhibition_id"

    async def test_get_mine(self, service, owner, created):
        view = await service.get_mine(owner)
        assert view.exhibition.id == created.exhibition.id

    async def test_get_mine_without_exhibition(self, service, owner):
        assert await service.get_mine(owner) is None


class TestUpdateInformation:
    """Tests for ExhibitionService.update_information."""

    async def test_partial_update(self, service, owner, created):
        view = await service.update_information(
            str(created.exhibition.id),
            owner,
            InformationUpdate(title=SetTo("Dancing robots"), comment=CLEAR),
        )
        assert view.information.title == "Dancing robots"
        assert view.information.comment is None
        assert view.information.location == created.information.location
        assert view.information.updated_at > created.information.updated_at

    async def test_update_forbidden_for_stranger(self, service, stranger, created, information_store):
        with pytest.raises(ExhibitionForbiddenError):
            await service.update_information(
                str(created.exhibition.id), stranger, InformationUpdate(title=SetTo("Mine now"))
            )
        assert information_store.rows[created.information.id].title == "Line-following robots"

    async def test_update_unknown_ar_design(self, service, owner, created):
        with pytest.raises(ArDesignNotFoundError):
            await service.update_information(
                str(created.exhibition.id), owner, InformationUpdate(ar_design_id=SetTo(ArDesignId.new()))
            )

    async def test_update_without_information(self, service, owner, exhibition_store, clock):
        exhibition = lifecycle.new_exhibition(ExhibitorId.from_string(owner), None, clock())
        await exhibition_store.save(exhibition)
        with pytest.raises(InformationRequiredError):
            await service.update_information(
                str(exhibition.id), owner, InformationUpdate(title=SetTo("x"))
            )

    async def test_update_with_dangling_information(self, service, owner, created, information_store):
        del information_store.rows[created.information.id]
        with pytest.raises(ExhibitionInformationNotFoundError):
            await service.update_information(
                str(created.exhibition.id), owner, InformationUpdate(title=SetTo("x"))
            )


class TestDelete:
    """Tests for ExhibitionService.delete."""

    async def test_delete_removes_both_records(
        self, service, owner, created, exhibition_store, information_store
    ):
        await service.delete(str(created.exhibition.id), owner)
        assert exhibition_store.rows == {}
        assert information_store.rows == {}
        assert await service.get_mine(owner) is None

    async def test_delete_forbidden_for_stranger(self, service, stranger, created, exhibition_store):
        with pytest.raises(ExhibitionForbiddenError):
            await service.delete(str(created.exhibition.id), stranger)
        assert created.exhibition.id in exhibition_store.rows

    async def test_failed_information_delete_restores_exhibition(
        self, service, owner, created, exhibition_store, information_store
    ):
        """If the information cannot be deleted, the exhibition is written back."""
        information_store.fail_on.add("delete")
        with pytest.raises(StoreFailure):
            await service.delete(str(created.exhibition.id), owner)
        assert exhibition_store.rows[created.exhibition.id] == created.exhibition
        assert created.information.id in information_store.rows

    async def test_failed_restore_keeps_original_error(
        self, service, owner, created, exhibition_store, information_store, service_log
    ):
        information_store.fail_on.add("delete")
        exhibition_store.fail_on.add("save")
        with pytest.raises(StoreFailure, match="InMemoryExhibitionInformationStore.delete"):
            await service.delete(str(created.exhibition.id), owner)
        assert any("Restoring exhibition" in r.getMessage() for r in service_log.records)

    async def test_create_again_after_delete(self, service, owner, content, created):
        await service.delete(str(created.exhibition.id), owner)
        view = await service.create(owner, content(title="Second try"))
        assert view.information.title == "Second try"


class TestLifecycle:
    """Tests for publish, unpublish and draft through the service."""

    async def test_full_lifecycle(self, service, owner, created):
        exhibition_id = str(created.exhibition.id)

        published = await service.publish(exhibition_id, owner)
        assert published.exhibition.status is ExhibitionStatus.PUBLISHED
        assert published.exhibition.published_at is not None

        with pytest.raises(InvalidTransitionError):
            await service.publish(exhibition_id, owner)
        with pytest.raises(InvalidTransitionError):
            await service.draft(exhibition_id, owner)

        unpublished = await service.unpublish(exhibition_id, owner)
        assert unpublished.exhibition.status is ExhibitionStatus.UNPUBLISHED
        assert unpublished.exhibition.published_at is None

        drafted = await service.draft(exhibition_id, owner)
        assert drafted.exhibition.status is ExhibitionStatus.DRAFT

    async def test_draft_of_draft_does_not_write(self, service, owner, created, exhibition_store):
        exhibition_store.fail_on.add("save")
        view = await service.draft(str(created.exhibition.id), owner)
        assert view.exhibition == created.exhibition

    async def test_publish_without_information(self, service, owner, exhibition_store, clock):
        exhibition = lifecycle.new_exhibition(ExhibitorId.from_string(owner), None, clock())
        await exhibition_store.save(exhibition)
        with pytest.raises(InformationRequiredError):
            await service.publish(str(exhibition.id), owner)

    async def test_publish_forbidden_for_stranger(self, service, stranger, created, exhibition_store):
        with pytest.raises(ExhibitionForbiddenError):
            await service.publish(str(created.exhibition.id), stranger)
        assert exhibition_store.rows[created.exhibition.id].status is ExhibitionStatus.DRAFT

    async def test_unpublish_draft_is_conflict(self, service, owner, created):
        with pytest.raises(InvalidTransitionError):
            await service.unpublish(str(created.exhibition.id), owner)


class TestImages:
    """Tests for image upload, retrieval and removal."""

    async def test_upload_and_get(self, service, owner, created):
        exhibition_id = str(created.exhibition.id)
        await service.upload_image(exhibition_id, owner, PNG_BYTES)
        image = await service.get_image(exhibition_id, owner)
        assert image.data == PNG_BYTES
        assert image.content_type == "image/png"

    async def test_upload_replaces_image(self, service, owner, created):
        exhibition_id = str(created.exhibition.id)
        await service.upload_image(exhibition_id, owner, PNG_BYTES)
        await service.upload_image(exhibition_id, owner, GIF_BYTES)
        image = await service.get_image(exhibition_id, owner)
        assert image.content_type == "image/gif"

    async def test_get_without_image(self, service, owner, created):
        with pytest.raises(ImageNotFoundError):
            await service.get_image(str(created.exhibition.id), owner)

    async def test_delete_image(self, service, owner, created):
        exhibition_id = str(created.exhibition.id)
        await service.upload_image(exhibition_id, owner, PNG_BYTES)
        await service.delete_image(exhibition_id, owner)
        with pytest.raises(ImageNotFoundError):
            await service.get_image(exhibition_id, owner)

    async def test_delete_missing_image(self, service, owner, created):
        with pytest.raises(ImageNotFoundError):
            await service.delete_image(str(created.exhibition.id), owner)

    async def test_unknown_bytes_served_as_octet_stream(self, service, owner, created):
        await service.upload_image(str(created.exhibition.id), owner, b"legacy-blob")
        image = await service.get_image(str(created.exhibition.id), owner)
        assert image.content_type == "application/octet-stream"

    async def test_image_forbidden_for_stranger(self, service, owner, stranger, created):
        await service.upload_image(str(created.exhibition.id), owner, PNG_BYTES)
        with pytest.raises(ExhibitionForbiddenError):
            await service.get_image(str(created.exhibition.id), stranger)


class TestArDesigns:
    async def test_list_ar_designs(self, service, ar_design_store):
        first = ar_design_store.add("https://ar.example.com/a.png")
        second = ar_design_store.add(None)
        assert await service.list_ar_designs() == [first, second]
