"""Custom exceptions for opencode-extensions."""


class ExtensionError(Exception):
    """Base exception for opencode-extensions."""

    pass


class ConfigError(ExtensionError):
    """Invalid plugin configuration."""

    pass


class CommandLoadError(ExtensionError):
    """A command file could not be loaded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class UpdateCheckError(ExtensionError):
    """Update check failed."""

    pass
