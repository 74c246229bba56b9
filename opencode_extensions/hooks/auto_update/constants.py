"""Auto-update checker constants."""

PACKAGE_NAME = "opencode-extensions"
DISPLAY_NAME = "OpenCode Extensions"
LOG_PREFIX = "[auto-update-checker]"

STARTUP_TOAST_DURATION_MS = 5000
UPDATE_TOAST_DURATION_MS = 8000
CONFIG_ERROR_TOAST_DURATION_MS = 10000
