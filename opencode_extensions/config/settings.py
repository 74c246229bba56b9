"""Configuration settings."""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from opencode_extensions.commands.models import COMMAND_SCOPES, CommandScope
from opencode_extensions.exceptions import ConfigError

from .errors import ConfigErrorStore, config_errors

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "opencode-extensions.yaml"
CONFIG_PATH_ENV = "OPENCODE_EXTENSIONS_CONFIG"


@dataclass
class AutoUpdateConfig:
    """Auto-update checker settings."""

    enabled: bool = True
    show_startup_toast: bool = True
    sisyphus_enabled: bool = False
    pinned_version: str | None = None


@dataclass
class CommandsConfig:
    """Command loader settings."""

    enabled: bool = True
    scopes: list[CommandScope] = field(default_factory=lambda: list(COMMAND_SCOPES))


@dataclass
class Config:
    """Main configuration."""

    auto_update: AutoUpdateConfig = field(default_factory=AutoUpdateConfig)
    commands: CommandsConfig = field(default_factory=CommandsConfig)


def user_config_path() -> Path:
    """Get the user config path, honouring the environment override."""
    override = os.getenv(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "opencode" / CONFIG_FILENAME


def project_config_path(directory: str | Path) -> Path:
    return Path(directory) / ".opencode" / CONFIG_FILENAME


def _read_config_data(path: Path, store: ConfigErrorStore) -> dict[str, Any] | None:
    """Read a YAML config file into a dict.

    Returns None when the file is missing or unusable; unusable files are
    recorded in the error store.
    """
    if not path.exists():
        return None

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read config {path}: {e}")
        store.add(str(path), str(e))
        return None

    if not isinstance(data, dict):
        message = "top-level value must be a mapping"
        logger.warning(f"Invalid config {path}: {message}")
        store.add(str(path), message)
        return None

    return data


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return section


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse config dictionary into Config object."""
    config = Config()

    if "auto_update" in data:
        auto_update = _section(data, "auto_update")
        pinned = auto_update.get("pinned_version")
        config.auto_update = AutoUpdateConfig(
            enabled=bool(auto_update.get("enabled", True)),
            show_startup_toast=bool(auto_update.get("show_startup_toast", True)),
            sisyphus_enabled=bool(auto_update.get("sisyphus_enabled", False)),
            pinned_version=str(pinned) if pinned is not None else None,
        )

    if "commands" in data:
        commands = _section(data, "commands")
        scopes = commands.get("scopes", list(COMMAND_SCOPES))
        if not isinstance(scopes, list):
            raise ConfigError("'commands.scopes' must be a list")
        unknown = [s for s in scopes if s not in COMMAND_SCOPES]
        if unknown:
            raise ConfigError(f"Unknown command scopes: {', '.join(map(str, unknown))}")
        config.commands = CommandsConfig(
            enabled=bool(commands.get("enabled", True)),
            scopes=scopes,
        )

    return config


def load_config(
    path: Path | str | None = None,
    store: ConfigErrorStore | None = None,
) -> Config:
    """Load configuration from a YAML file.

    A missing file yields the defaults. A file that cannot be parsed also
    yields the defaults and is recorded in the config error store.
    """
    store = store if store is not None else config_errors
    path = Path(path) if path is not None else user_config_path()

    data = _read_config_data(path, store)
    if data is None:
        return Config()

    try:
        return _parse_config(data)
    except ConfigError as e:
        logger.warning(f"Invalid config {path}: {e}")
        store.add(str(path), str(e))
        return Config()


def _merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def load_plugin_config(
    directory: str | Path,
    store: ConfigErrorStore | None = None,
) -> Config:
    """Load the user config, then overlay the project config.

    Args:
        directory: Project directory the host was started in.
        store: Error store, defaults to the process-wide one.

    Returns:
        Merged Config.
    """
    store = store if store is not None else config_errors
    user_path = user_config_path()
    project_path = project_config_path(directory)

    data: dict[str, Any] = {}
    for path in (user_path, project_path):
        loaded = _read_config_data(path, store)
        if loaded is not None:
            logger.info(f"Loaded config from {path}")
            data = _merge_sections(data, loaded)

    try:
        return _parse_config(data)
    except ConfigError as e:
        logger.warning(f"Invalid merged config: {e}")
        store.add(str(project_path if project_path.exists() else user_path), str(e))
        return Config()
