"""Plugin entry point wiring config, commands and hooks."""
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from dotenv import load_dotenv

from opencode_extensions.commands import CommandDefinition, CommandRegistry
from opencode_extensions.config import Config, load_plugin_config
from opencode_extensions.hooks.auto_update import (
    AutoUpdateCheckerOptions,
    PackageUpdateChecker,
    create_auto_update_checker_hook,
)
from opencode_extensions.hooks.auto_update.checker import LatestVersionFetcher
from opencode_extensions.hooks.auto_update.types import PluginContext

logger = logging.getLogger(__name__)

EventHandler = Callable[[dict[str, Any]], Awaitable[None]]


@dataclass
class Plugin:
    """Everything the host needs from this plugin."""

    config: Config
    registry: CommandRegistry
    hooks: dict[str, EventHandler] = field(default_factory=dict)

    @property
    def commands(self) -> dict[str, CommandDefinition]:
        return self.registry.commands

    async def event(self, event: dict[str, Any]) -> None:
        """Forward a host event to the registered hooks."""
        handler = self.hooks.get("event")
        if handler is not None:
            await handler(event)


def create_plugin(ctx: PluginContext, fetch_latest_version: LatestVersionFetcher) -> Plugin:
    """Initialize the plugin for a host context.

    Args:
        ctx: Host context with the project directory and client.
        fetch_latest_version: Registry lookup for the latest published
            version of a package.

    Returns:
        Configured Plugin.
    """
    load_dotenv()

    config = load_plugin_config(ctx.directory)

    registry = CommandRegistry()
    if config.commands.enabled:
        registry.refresh(config.commands.scopes)

    hooks: dict[str, EventHandler] = {}
    if config.auto_update.enabled:
        checker = PackageUpdateChecker(
            fetch_latest_version,
            pinned_version=config.auto_update.pinned_version,
        )
        options = AutoUpdateCheckerOptions(
            show_startup_toast=config.auto_update.show_startup_toast,
            sisyphus_enabled=config.auto_update.sisyphus_enabled,
        )
        hooks.update(create_auto_update_checker_hook(ctx, checker, options))
    else:
        logger.info("Auto-update checker disabled by config")

    return Plugin(config=config, registry=registry, hooks=hooks)
