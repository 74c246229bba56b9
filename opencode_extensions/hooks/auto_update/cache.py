"""In-memory package version cache."""
import logging

logger = logging.getLogger(__name__)


class VersionCache:
    """Remembers package metadata for the lifetime of the process."""

    def __init__(self):
        self._versions: dict[str, str] = {}

    def get(self, package_name: str) -> str | None:
        return self._versions.get(package_name)

    def set(self, package_name: str, version: str) -> None:
        self._versions[package_name] = version

    def invalidate_package(self, package_name: str) -> bool:
        """Drop one package's entry.

        Returns:
            True if an entry was removed.
        """
        removed = self._versions.pop(package_name, None) is not None
        if removed:
            logger.info(f"Invalidated cached metadata for {package_name}")
        return removed

    def invalidate(self) -> None:
        """Drop every entry."""
        self._versions.clear()


# Process-wide cache
version_cache = VersionCache()
