"""Host lifecycle hooks."""
from .auto_update import (
    AutoUpdateCheckerHook,
    AutoUpdateCheckerOptions,
    create_auto_update_checker_hook,
)

__all__ = [
    "AutoUpdateCheckerHook",
    "AutoUpdateCheckerOptions",
    "create_auto_update_checker_hook",
]
