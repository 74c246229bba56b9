"""Accumulator for configuration load errors."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigLoadError:
    """A config file that failed to load."""

    path: str
    error: str


class ConfigErrorStore:
    """Collects config load errors until they are shown to the user."""

    def __init__(self):
        self._errors: list[ConfigLoadError] = []

    def add(self, path: str, error: str) -> None:
        self._errors.append(ConfigLoadError(path=path, error=error))

    def get_all(self) -> list[ConfigLoadError]:
        return list(self._errors)

    def clear(self) -> None:
        self._errors.clear()

    def __len__(self) -> int:
        return len(self._errors)


# Process-wide store
config_errors = ConfigErrorStore()


def add_config_load_error(path: str, error: str) -> None:
    config_errors.add(path, error)


def get_config_load_errors() -> list[ConfigLoadError]:
    return config_errors.get_all()


def clear_config_load_errors() -> None:
    config_errors.clear()
