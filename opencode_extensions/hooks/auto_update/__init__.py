"""Auto-update checker hook."""
from .cache import VersionCache, version_cache
from .checker import PackageUpdateChecker, installed_version
from .constants import PACKAGE_NAME
from .hook import AutoUpdateCheckerHook, create_auto_update_checker_hook
from .types import AutoUpdateCheckerOptions, UpdateChecker, UpdateCheckResult
from .versions import Version, compare_versions, is_newer, parse_version

__all__ = [
    "VersionCache",
    "version_cache",
    "PackageUpdateChecker",
    "installed_version",
    "PACKAGE_NAME",
    "AutoUpdateCheckerHook",
    "create_auto_update_checker_hook",
    "AutoUpdateCheckerOptions",
    "UpdateChecker",
    "UpdateCheckResult",
    "Version",
    "compare_versions",
    "is_newer",
    "parse_version",
]
