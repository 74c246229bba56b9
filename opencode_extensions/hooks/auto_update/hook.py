"""Auto-update checker hook for session start."""
import logging
from typing import Any, Awaitable, Callable

from opencode_extensions.config.errors import ConfigErrorStore, config_errors

from .cache import VersionCache, version_cache
from .constants import (
    CONFIG_ERROR_TOAST_DURATION_MS,
    DISPLAY_NAME,
    LOG_PREFIX,
    STARTUP_TOAST_DURATION_MS,
    UPDATE_TOAST_DURATION_MS,
)
from .types import AutoUpdateCheckerOptions, PluginContext, ToastVariant, UpdateChecker

logger = logging.getLogger(__name__)

SESSION_CREATED = "session.created"


def _parent_id(event: dict[str, Any]) -> str | None:
    properties = event.get("properties") or {}
    if not isinstance(properties, dict):
        return None
    info = properties.get("info") or {}
    if not isinstance(info, dict):
        return None
    return info.get("parentID")


class AutoUpdateCheckerHook:
    """Checks for updates once per process, on the first root session."""

    def __init__(
        self,
        ctx: PluginContext,
        checker: UpdateChecker,
        options: AutoUpdateCheckerOptions | None = None,
        error_store: ConfigErrorStore | None = None,
        cache: VersionCache | None = None,
    ):
        self.ctx = ctx
        self.checker = checker
        self.options = options or AutoUpdateCheckerOptions()
        self.error_store = error_store if error_store is not None else config_errors
        self.cache = cache if cache is not None else version_cache
        self.has_checked = False

    def toast_message(self, is_update: bool, latest_version: str | None = None) -> str:
        if self.options.sisyphus_enabled:
            if is_update:
                return (
                    "Sisyphus on steroids is steering OpenCode.\n"
                    f"v{latest_version} available. Restart to apply."
                )
            return "Sisyphus on steroids is steering OpenCode."

        if is_update:
            return (
                "OpenCode is now on Steroids. oMoMoMoMo...\n"
                f"v{latest_version} available. Restart OpenCode to apply."
            )
        return "OpenCode is now on Steroids. oMoMoMoMo..."

    async def _show_toast(
        self, title: str, message: str, variant: ToastVariant, duration: int
    ) -> None:
        """Show a toast, ignoring delivery failures."""
        try:
            await self.ctx.client.tui.show_toast(
                title=title,
                message=message,
                variant=variant,
                duration=duration,
            )
        except Exception as e:
            logger.debug(f"{LOG_PREFIX} Toast delivery failed: {e}")

    async def show_version_toast(self, version: str | None) -> None:
        display_version = version or "unknown"
        await self._show_toast(
            title=f"{DISPLAY_NAME} {display_version}",
            message=self.toast_message(False),
            variant="info",
            duration=STARTUP_TOAST_DURATION_MS,
        )
        logger.info(f"{LOG_PREFIX} Startup toast shown: v{display_version}")

    async def show_config_errors(self) -> None:
        """Surface accumulated config load errors, then clear them."""
        errors = self.error_store.get_all()
        if not errors:
            return

        error_messages = "\n".join(f"{e.path}: {e.error}" for e in errors)
        await self._show_toast(
            title="Config Load Error",
            message=f"Failed to load config:\n{error_messages}",
            variant="error",
            duration=CONFIG_ERROR_TOAST_DURATION_MS,
        )
        logger.info(f"{LOG_PREFIX} Config load errors shown: {len(errors)} error(s)")
        self.error_store.clear()

    async def event(self, event: dict[str, Any]) -> None:
        """Handle a host lifecycle event."""
        if event.get("type") != SESSION_CREATED:
            return
        if self.has_checked:
            return
        # Child sessions (subagents) carry a parent id
        if _parent_id(event):
            return

        self.has_checked = True
        directory = self.ctx.directory

        try:
            result = await self.checker.check_for_update(directory)

            if result.is_local_dev:
                logger.info(f"{LOG_PREFIX} Skipped: local development mode")
                if self.options.show_startup_toast:
                    version = (
                        self.checker.get_local_dev_version(directory)
                        or self.checker.get_cached_version()
                    )
                    await self.show_version_toast(version)
                return

            if result.is_pinned:
                logger.info(f"{LOG_PREFIX} Skipped: version pinned to {result.current_version}")
                if self.options.show_startup_toast:
                    await self.show_version_toast(result.current_version)
                return

            if not result.needs_update:
                logger.info(f"{LOG_PREFIX} No update needed")
                if self.options.show_startup_toast:
                    await self.show_version_toast(result.current_version)
                return

            self.cache.invalidate_package(self.checker.package_name)

            await self._show_toast(
                title=f"{DISPLAY_NAME} {result.latest_version}",
                message=self.toast_message(True, result.latest_version),
                variant="info",
                duration=UPDATE_TOAST_DURATION_MS,
            )
            logger.info(
                f"{LOG_PREFIX} Update notification sent: "
                f"v{result.current_version} -> v{result.latest_version}"
            )
        except Exception as e:
            logger.warning(f"{LOG_PREFIX} Error during update check: {e}")

        await self.show_config_errors()


def create_auto_update_checker_hook(
    ctx: PluginContext,
    checker: UpdateChecker,
    options: AutoUpdateCheckerOptions | None = None,
    error_store: ConfigErrorStore | None = None,
    cache: VersionCache | None = None,
) -> dict[str, Callable[[dict[str, Any]], Awaitable[None]]]:
    """Create the hooks dict registered with the host.

    Returns:
        A dict with the ``event`` handler.
    """
    hook = AutoUpdateCheckerHook(ctx, checker, options, error_store, cache)
    return {"event": hook.event}
