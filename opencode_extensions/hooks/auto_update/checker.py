"""Update check decisions over injected version sources."""
import logging
from importlib import metadata
from typing import Awaitable, Callable

from opencode_extensions.exceptions import UpdateCheckError

from .cache import VersionCache, version_cache
from .constants import LOG_PREFIX, PACKAGE_NAME
from .types import UpdateCheckResult
from .versions import is_newer

logger = logging.getLogger(__name__)

LatestVersionFetcher = Callable[[str], Awaitable[str | None]]


def installed_version(package_name: str = PACKAGE_NAME) -> str | None:
    """Get the installed distribution version, if any."""
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


class PackageUpdateChecker:
    """Decides whether a newer release of a package is available.

    The registry lookup is supplied by the caller as ``fetch_latest_version``.
    """

    def __init__(
        self,
        fetch_latest_version: LatestVersionFetcher,
        package_name: str = PACKAGE_NAME,
        current_version: Callable[[], str | None] | None = None,
        pinned_version: str | None = None,
        local_dev_version: Callable[[str], str | None] | None = None,
        cache: VersionCache | None = None,
    ):
        """Initialize the checker.

        Args:
            fetch_latest_version: Async registry lookup returning the latest
                published version for a package name.
            package_name: Package to check.
            current_version: Returns the installed version. Defaults to the
                installed distribution metadata.
            pinned_version: Version the user pinned; disables update checks.
            local_dev_version: Returns a version when the package runs from a
                local checkout of ``directory``.
            cache: Version cache, defaults to the process-wide one.
        """
        self.package_name = package_name
        self._fetch_latest_version = fetch_latest_version
        self._current_version = current_version or (lambda: installed_version(package_name))
        self.pinned_version = pinned_version
        self._local_dev_version = local_dev_version
        self._cache = cache if cache is not None else version_cache

    def get_local_dev_version(self, directory: str) -> str | None:
        if self._local_dev_version is None:
            return None
        return self._local_dev_version(directory)

    def get_cached_version(self) -> str | None:
        """Get the installed version, reading it once per cache lifetime."""
        cached = self._cache.get(self.package_name)
        if cached is not None:
            return cached

        version = self._current_version()
        if version is not None:
            self._cache.set(self.package_name, version)
        return version

    async def check_for_update(self, directory: str) -> UpdateCheckResult:
        """Compare the installed version with the latest published one.

        Raises:
            UpdateCheckError: If the registry lookup fails.
        """
        local_version = self.get_local_dev_version(directory)
        if local_version:
            return UpdateCheckResult(
                needs_update=False,
                current_version=local_version,
                is_local_dev=True,
            )

        if self.pinned_version:
            return UpdateCheckResult(
                needs_update=False,
                current_version=self.pinned_version,
                is_pinned=True,
            )

        current = self.get_cached_version()
        if current is None:
            logger.info(f"{LOG_PREFIX} Installed version of {self.package_name} unknown")
            return UpdateCheckResult(needs_update=False)

        try:
            latest = await self._fetch_latest_version(self.package_name)
        except Exception as e:
            raise UpdateCheckError(
                f"Failed to fetch latest version of {self.package_name}: {e}"
            ) from e

        return UpdateCheckResult(
            needs_update=is_newer(latest, current),
            current_version=current,
            latest_version=latest,
        )
