"""Test the package update checker."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from opencode_extensions.exceptions import UpdateCheckError
from opencode_extensions.hooks.auto_update import PackageUpdateChecker, VersionCache
from opencode_extensions.hooks.auto_update.checker import installed_version


@pytest.fixture
def cache():
    return VersionCache()


@pytest.mark.asyncio
async def test_update_available(cache):
    fetch = AsyncMock(return_value="1.2.0")
    checker = PackageUpdateChecker(fetch, current_version=lambda: "1.1.0", cache=cache)

    result = await checker.check_for_update("/proj")

    assert result.needs_update is True
    assert result.current_version == "1.1.0"
    assert result.latest_version == "1.2.0"
    fetch.assert_awaited_once_with("opencode-extensions")


@pytest.mark.asyncio
async def test_up_to_date(cache):
    fetch = AsyncMock(return_value="1.1.0")
    checker = PackageUpdateChecker(fetch, current_version=lambda: "1.1.0", cache=cache)

    result = await checker.check_for_update("/proj")

    assert result.needs_update is False
    assert result.is_pinned is False
    assert result.is_local_dev is False


@pytest.mark.asyncio
async def test_pinned_skips_registry(cache):
    fetch = AsyncMock(return_value="9.0.0")
    checker = PackageUpdateChecker(
        fetch, current_version=lambda: "1.0.0", pinned_version="1.0.0", cache=cache
    )

    result = await checker.check_for_update("/proj")

    assert result.is_pinned is True
    assert result.current_version == "1.0.0"
    fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_local_dev(cache):
    fetch = AsyncMock()
    local = MagicMock(return_value="1.5.0-dev")
    checker = PackageUpdateChecker(fetch, local_dev_version=local, cache=cache)

    result = await checker.check_for_update("/proj")

    assert result.is_local_dev is True
    assert result.current_version == "1.5.0-dev"
    local.assert_called_with("/proj")
    fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_installed_version(cache):
    fetch = AsyncMock(return_value="1.0.0")
    checker = PackageUpdateChecker(fetch, current_version=lambda: None, cache=cache)

    result = await checker.check_for_update("/proj")

    assert result.needs_update is False
    fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_registry_failure_wrapped(cache):
    fetch = AsyncMock(side_effect=ConnectionError("offline"))
    checker = PackageUpdateChecker(fetch, current_version=lambda: "1.0.0", cache=cache)

    with pytest.raises(UpdateCheckError, match="offline"):
        await checker.check_for_update("/proj")


@pytest.mark.asyncio
async def test_registry_returns_nothing(cache):
    fetch = AsyncMock(return_value=None)
    checker = PackageUpdateChecker(fetch, current_version=lambda: "1.0.0", cache=cache)

    result = await checker.check_for_update("/proj")

    assert result.needs_update is False
    assert result.latest_version is None


def test_cached_version_read_once(cache):
    """Installed version is read once until the cache is invalidated."""
    reads = MagicMock(return_value="1.0.0")
    checker = PackageUpdateChecker(AsyncMock(), current_version=reads, cache=cache)

    assert checker.get_cached_version() == "1.0.0"
    assert checker.get_cached_version() == "1.0.0"
    assert reads.call_count == 1

    cache.invalidate_package("opencode-extensions")
    checker.get_cached_version()

    assert reads.call_count == 2


def test_installed_version_missing_package():
    assert installed_version("definitely-not-an-installed-package-xyz") is None


def test_version_cache():
    cache = VersionCache()
    cache.set("a", "1.0.0")
    cache.set("b", "2.0.0")

    assert cache.invalidate_package("a") is True
    assert cache.invalidate_package("a") is False
    assert cache.get("b") == "2.0.0"

    cache.invalidate()

    assert cache.get("b") is None
