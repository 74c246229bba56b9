"""Command registry merging every command scope."""
import logging
from typing import Callable, Iterable

from opencode_extensions.exceptions import CommandLoadError

from .discovery import (
    ARGUMENTS_PLACEHOLDER,
    load_opencode_global_commands,
    load_opencode_project_commands,
    load_project_commands,
    load_user_commands,
)
from .models import COMMAND_SCOPES, CommandDefinition, CommandScope

logger = logging.getLogger(__name__)

ScopeLoader = Callable[[list[CommandLoadError] | None], dict[str, CommandDefinition]]

# Merge order, later scopes override earlier ones
SCOPE_LOADERS: tuple[tuple[CommandScope, ScopeLoader], ...] = (
    ("user", load_user_commands),
    ("opencode", load_opencode_global_commands),
    ("project", load_project_commands),
    ("opencode-project", load_opencode_project_commands),
)


class CommandRegistry:
    """Stores the merged command definitions."""

    def __init__(self):
        self._commands: dict[str, CommandDefinition] = {}
        self.errors: list[CommandLoadError] = []

    @property
    def commands(self) -> dict[str, CommandDefinition]:
        """Get a copy of all registered commands keyed by name."""
        return dict(self._commands)

    @property
    def names(self) -> list[str]:
        return list(self._commands)

    def get(self, name: str) -> CommandDefinition | None:
        """Get command by name."""
        return self._commands.get(name)

    def refresh(self, scopes: Iterable[CommandScope] = COMMAND_SCOPES) -> int:
        """Rescan the enabled scopes.

        Args:
            scopes: Scopes to load. Order is fixed by SCOPE_LOADERS.

        Returns:
            Number of commands registered.
        """
        enabled = set(scopes)
        commands: dict[str, CommandDefinition] = {}
        errors: list[CommandLoadError] = []

        for scope, loader in SCOPE_LOADERS:
            if scope not in enabled:
                continue
            loaded = loader(errors)
            for name in loaded:
                if name in commands:
                    logger.debug(f"Command '{name}' overridden by {scope} scope")
            commands.update(loaded)

        self._commands = commands
        self.errors = errors

        if errors:
            logger.warning(f"Skipped {len(errors)} command file(s) that failed to load")
        logger.info(f"Loaded {len(commands)} commands")

        return len(commands)

    def render(self, cmd: CommandDefinition | str, args: str = "") -> str:
        """Substitute arguments into a command template.

        Every $ARGUMENTS placeholder receives the full argument string; the
        rest of the template is left untouched.

        Args:
            cmd: The command, or its name.
            args: User-provided arguments string.

        Returns:
            Template with arguments substituted.

        Raises:
            KeyError: If a name is given that is not registered.
        """
        if isinstance(cmd, str):
            definition = self.get(cmd)
            if definition is None:
                raise KeyError(cmd)
            cmd = definition

        return cmd.template.replace(ARGUMENTS_PLACEHOLDER, args)
