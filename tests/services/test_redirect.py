"""Tests for short code resolution."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from taskhub.core.config import Settings
from taskhub.repositories.base import RepositoryError
from taskhub.repositories.short_link_repository import ShortLinkRepository
from taskhub.services.exceptions import URLNotFoundError
from taskhub.services.redirect import RedirectResolver
from tests.utils import create_test_link


@pytest.fixture
def settings():
    return Settings(_env_file=None, ENVIRONMENT="testing", SHORT_LINK_PATH="/s", LOG_TO_FILE=False)


@pytest.fixture
def repository():
    repo = MagicMock(spec=ShortLinkRepository)
    repo.find_original_url_by_code = AsyncMock(return_value=None)
    return repo


@pytest.mark.parametrize(
    "path,expected",
    [
        ("abc12", "abc12"),
        ("s/abc12", "abc12"),
        ("/s/abc12", "abc12"),
        ("/abc12", "abc12"),
        ("", ""),
        ("/s/", ""),
    ],
)
def test_extract_code(repository, settings, path, expected):
    assert RedirectResolver(repository, settings).extract_code(path) == expected


@pytest.mark.asyncio
async def test_resolve_known_code(test_db, settings):
    await create_test_link(test_db, original_url="https://example.com/target", short_code="known")
    resolver = RedirectResolver(ShortLinkRepository(), settings)

    assert await resolver.resolve(test_db, "known") == "https://example.com/target"
    assert await resolver.resolve(test_db, "/s/known") == "https://example.com/target"


@pytest.mark.asyncio
async def test_resolve_unknown_code(test_db, settings):
    resolver = RedirectResolver(ShortLinkRepository(), settings)

    with pytest.raises(URLNotFoundError):
        await resolver.resolve(test_db, "nope1")


@pytest.mark.asyncio
async def test_resolve_empty_code_skips_lookup(repository, settings):
    resolver = RedirectResolver(repository, settings)

    with pytest.raises(URLNotFoundError):
        await resolver.resolve(MagicMock(), "/s/")

    repository.find_original_url_by_code.assert_not_awaited()


@pytest.mark.asyncio
async def test_lookup_failure_reads_as_not_found(repository, settings):
    repository.find_original_url_by_code = AsyncMock(side_effect=RepositoryError("connection lost"))
    resolver = RedirectResolver(repository, settings)

    with pytest.raises(URLNotFoundError):
        await resolver.resolve(MagicMock(), "abc12")
