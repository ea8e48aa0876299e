"""
Unit tests for the Mongo repositories against an in-memory motor client
(mongomock-motor), covering the deleted-flag filters.
"""
from datetime import timedelta

import pytest
from mongomock_motor import AsyncMongoMockClient

from snapfind.application.dto.object_dto import SaveObjectRequest
from snapfind.application.use_cases.objects.save_object import SaveObjectUseCase
from snapfind.application.use_cases.pictures.delete_picture import DeletePictureUseCase
from snapfind.domain.models.detected_object import DetectedObject
from snapfind.domain.models.picture import Picture
from snapfind.infrastructure.db.mongo_object_repository import MongoObjectRepository
from snapfind.infrastructure.db.mongo_picture_repository import MongoPictureRepository
from snapfind.utils.datetime_utils import utc_now

KITCHEN = "user-u1/images/snapfind_1.jpg"
DESK = "user-u1/images/snapfind_2.jpg"


@pytest.fixture
def collections():
    db = AsyncMongoMockClient()["test_db"]
    return db["pictures"], db["objects"]


@pytest.fixture
def picture_repo(collections):
    pictures, objects = collections
    return MongoPictureRepository(picture_collection=pictures, object_collection=objects)


@pytest.fixture
def object_repo(collections):
    pictures, objects = collections
    return MongoObjectRepository(object_collection=objects, picture_collection=pictures)


async def _picture_with(picture_repo, object_repo, image_url, *names, user_id="u1"):
    picture = await picture_repo.create(
        Picture(id=None, user_id=user_id, image_url=image_url, picture_name="Sunny Kitchen", description="")
    )
    for name in names:
        await object_repo.create(DetectedObject(id=None, picture_id=picture.id, object_name=name))
    return picture


def _names(rows):
    return sorted(row.object_name for row in rows)


class TestListWithPictures:
    @pytest.mark.asyncio
    async def test_deleted_picture_hides_its_objects(self, picture_repo, object_repo):
        await _picture_with(picture_repo, object_repo, KITCHEN, "cup", "kettle")
        await _picture_with(picture_repo, object_repo, DESK, "pen")

        affected = await picture_repo.soft_delete_by_image("u1", KITCHEN)

        assert affected == 2
        assert _names(await object_repo.list_with_pictures("u1")) == ["pen"]
        assert await object_repo.list_with_pictures("u1", image_url=KITCHEN) == []

    @pytest.mark.asyncio
    async def test_deleted_object_in_live_picture_is_hidden(self, picture_repo, object_repo):
        picture = await _picture_with(picture_repo, object_repo, KITCHEN, "cup")
        await object_repo.soft_delete_by_picture(picture.id)
        await object_repo.create(DetectedObject(id=None, picture_id=picture.id, object_name="mug"))

        rows = await object_repo.list_with_pictures("u1")

        assert _names(rows) == ["mug"]
        assert rows[0].image_url == KITCHEN
        assert rows[0].picture_name == "Sunny Kitchen"

    @pytest.mark.asyncio
    async def test_name_search_skips_deleted_rows(self, picture_repo, object_repo):
        await _picture_with(picture_repo, object_repo, KITCHEN, "coffee cup")
        await _picture_with(picture_repo, object_repo, DESK, "cup holder", "pen")
        await picture_repo.soft_delete_by_image("u1", KITCHEN)

        assert _names(await object_repo.list_with_pictures("u1", name_query="CUP")) == ["cup holder"]

    @pytest.mark.asyncio
    async def test_other_owner_rows_are_not_listed(self, picture_repo, object_repo):
        await _picture_with(picture_repo, object_repo, KITCHEN, "cup")
        await _picture_with(picture_repo, object_repo, "user-u2/images/snapfind_9.jpg", "pen", user_id="u2")

        assert _names(await object_repo.list_with_pictures("u1")) == ["cup"]
        assert _names(await object_repo.list_with_pictures("u2")) == ["pen"]

    @pytest.mark.asyncio
    async def test_renaming_deleted_object_fails(self, picture_repo, object_repo):
        picture = await _picture_with(picture_repo, object_repo, KITCHEN)
        saved = await object_repo.create(DetectedObject(id=None, picture_id=picture.id, object_name="cup"))
        await object_repo.soft_delete_by_picture(picture.id)

        assert await object_repo.rename(saved.id, "mug") is False


class TestPictureDeletedFlag:
    @pytest.mark.asyncio
    async def test_count_created_between_ignores_deleted_pictures(self, picture_repo, object_repo):
        await _picture_with(picture_repo, object_repo, KITCHEN)
        await _picture_with(picture_repo, object_repo, DESK)
        await picture_repo.soft_delete_by_image("u1", KITCHEN)
        now = utc_now()

        count = await picture_repo.count_created_between("u1", now - timedelta(hours=1), now + timedelta(hours=1))

        assert count == 1

    @pytest.mark.asyncio
    async def test_list_active_skips_deleted(self, picture_repo, object_repo):
        await _picture_with(picture_repo, object_repo, KITCHEN)
        await _picture_with(picture_repo, object_repo, DESK)
        await picture_repo.soft_delete_by_image("u1", DESK)

        assert [p.image_url for p in await picture_repo.list_active("u1")] == [KITCHEN]

    @pytest.mark.asyncio
    async def test_count_active_by_picture(self, picture_repo, object_repo):
        kitchen = await _picture_with(picture_repo, object_repo, KITCHEN, "cup", "kettle")
        desk = await _picture_with(picture_repo, object_repo, DESK, "pen")
        await object_repo.soft_delete_by_picture(desk.id)

        counts = await object_repo.count_active_by_picture([kitchen.id, desk.id])

        assert counts == {kitchen.id: 2}

    @pytest.mark.asyncio
    async def test_restore_brings_back_picture_and_objects(self, picture_repo, object_repo):
        await _picture_with(picture_repo, object_repo, KITCHEN, "cup", "kettle")
        await picture_repo.soft_delete_by_image("u1", KITCHEN)

        restored = await picture_repo.restore_by_image("u1", KITCHEN)

        assert restored == 2
        assert _names(await object_repo.list_with_pictures("u1")) == ["cup", "kettle"]
        assert await picture_repo.restore_by_image("u1", KITCHEN) == 0

    @pytest.mark.asyncio
    async def test_soft_delete_unknown_image(self, picture_repo):
        assert await picture_repo.soft_delete_by_image("u1", "user-u1/images/missing.jpg") == 0

    @pytest.mark.asyncio
    async def test_undelete_leaves_objects_deleted(self, picture_repo, object_repo):
        picture = await _picture_with(picture_repo, object_repo, KITCHEN, "cup")
        await picture_repo.soft_delete_by_image("u1", KITCHEN)

        assert await picture_repo.undelete(picture.id) is True

        found = await picture_repo.find_by_image("u1", KITCHEN)
        assert found.deleted is False
        assert await object_repo.list_with_pictures("u1") == []
        assert await picture_repo.undelete("not-an-id") is False


class TestSaveAfterDelete:
    @pytest.mark.asyncio
    async def test_saving_into_deleted_picture_does_not_resurrect_old_objects(
        self, mock_settings, picture_repo, object_repo, cache
    ):
        save = SaveObjectUseCase(picture_repo, object_repo, cache)
        delete = DeletePictureUseCase(picture_repo, cache)

        first = await save.execute(SaveObjectRequest(object_name="cup", image_url=KITCHEN), "u1")
        await delete.execute("u1", KITCHEN)
        second = await save.execute(SaveObjectRequest(object_name="cup", image_url=KITCHEN), "u1")

        assert first.remote_saved and second.remote_saved
        assert second.picture_id == first.picture_id
        rows = await object_repo.list_with_pictures("u1")
        assert [row.object_name for row in rows] == ["cup"]
        assert rows[0].object_id == second.object_id
