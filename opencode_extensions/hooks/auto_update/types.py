"""Types shared by the auto-update checker."""
from dataclasses import dataclass
from typing import Any, Literal, Protocol

ToastVariant = Literal["info", "error"]


@dataclass(frozen=True)
class UpdateCheckResult:
    """Outcome of comparing the installed version with the registry."""

    needs_update: bool
    current_version: str | None = None
    latest_version: str | None = None
    is_local_dev: bool = False
    is_pinned: bool = False


@dataclass
class AutoUpdateCheckerOptions:
    """Behaviour switches for the hook."""

    show_startup_toast: bool = True
    sisyphus_enabled: bool = False


class UpdateChecker(Protocol):
    """Source of update check results."""

    package_name: str

    async def check_for_update(self, directory: str) -> UpdateCheckResult: ...

    def get_local_dev_version(self, directory: str) -> str | None: ...

    def get_cached_version(self) -> str | None: ...


class TuiClient(Protocol):
    """Toast capability of the host UI."""

    async def show_toast(
        self,
        *,
        title: str,
        message: str,
        variant: ToastVariant,
        duration: int,
    ) -> Any: ...


class HostClient(Protocol):
    tui: TuiClient


class PluginContext(Protocol):
    """What the host hands to a plugin."""

    directory: str
    client: HostClient
