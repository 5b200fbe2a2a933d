"""Tests for the short link repository."""

from datetime import datetime

import pytest

from taskhub.repositories.base import DuplicateEntityError
from taskhub.repositories.short_link_repository import ShortLinkRepository
from tests.utils import create_test_link, create_test_user, random_url


@pytest.mark.repository
class TestShortLinkRepository:
    """Tests for ShortLinkRepository."""

    @pytest.fixture
    def repository(self):
        return ShortLinkRepository()

    @pytest.mark.asyncio
    async def test_insert_short_link(self, test_db, repository):
        original_url = random_url()
        created_at = datetime(2024, 3, 1, 12, 0, 0)

        link = await repository.insert_short_link(
            test_db, original_url=original_url, short_code="aB3dE", created_at=created_at
        )

        assert link.id is not None
        assert link.original_url == original_url
        assert link.short_code == "aB3dE"
        assert link.created_at == created_at
        assert link.creator_id is None

    @pytest.mark.asyncio
    async def test_insert_records_creator(self, test_db, repository):
        user = await create_test_user(test_db)

        link = await repository.insert_short_link(
            test_db,
            original_url=random_url(),
            short_code="byusr",
            created_at=datetime.utcnow(),
            creator_id=user.user_id,
        )

        assert link.creator_id == user.user_id

    @pytest.mark.asyncio
    async def test_insert_duplicate_code(self, test_db, repository):
        await repository.insert_short_link(
            test_db, original_url=random_url(), short_code="dupe1", created_at=datetime.utcnow()
        )
        await test_db.commit()

        with pytest.raises(DuplicateEntityError) as excinfo:
            await repository.insert_short_link(
                test_db, original_url=random_url(), short_code="dupe1", created_at=datetime.utcnow()
            )

        assert excinfo.value.field_name == "short_code"
        assert excinfo.value.value == "dupe1"
        # The first mapping is untouched
        assert await repository.find_original_url_by_code(test_db, "dupe1") is not None
        assert await repository.count_by_code(test_db, "dupe1") == 1

    @pytest.mark.asyncio
    async def test_count_by_code(self, test_db, repository):
        await create_test_link(test_db, short_code="cnt01")

        assert await repository.count_by_code(test_db, "cnt01") == 1
        assert await repository.count_by_code(test_db, "cnt02") == 0

    @pytest.mark.asyncio
    async def test_count_by_code_is_case_sensitive(self, test_db, repository):
        await create_test_link(test_db, short_code="AbCdE")

        assert await repository.count_by_code(test_db, "abcde") == 0

    @pytest.mark.asyncio
    async def test_find_original_url_by_code(self, test_db, repository):
        link = await create_test_link(test_db, original_url="https://example.com/page", short_code="find1")

        assert await repository.find_original_url_by_code(test_db, link.short_code) == "https://example.com/page"
        assert await repository.find_original_url_by_code(test_db, "nope1") is None

    @pytest.mark.asyncio
    async def test_list_links(self, test_db, repository):
        first = await create_test_link(test_db)
        second = await create_test_link(test_db)
        third = await create_test_link(test_db)

        links = await repository.list_links(test_db)
        assert [link.id for link in links] == [first.id, second.id, third.id]

        page = await repository.list_links(test_db, skip=1, limit=1)
        assert [link.id for link in page] == [second.id]
