"""Data models for markdown commands."""
from dataclasses import dataclass
from typing import Literal, Mapping

CommandScope = Literal["user", "project", "opencode", "opencode-project"]

COMMAND_SCOPES: tuple[CommandScope, ...] = (
    "user",
    "project",
    "opencode",
    "opencode-project",
)


@dataclass(frozen=True)
class CommandFrontmatter:
    """Recognized frontmatter keys of a command file."""

    description: str | None = None
    agent: str | None = None
    model: str | None = None
    subtask: str | None = None
    argument_hint: str | None = None

    @classmethod
    def from_data(cls, data: Mapping[str, str]) -> "CommandFrontmatter":
        """Build from raw frontmatter, ignoring unrecognized keys."""
        return cls(
            description=data.get("description"),
            agent=data.get("agent"),
            model=data.get("model"),
            subtask=data.get("subtask"),
            argument_hint=data.get("argument-hint"),
        )


@dataclass(frozen=True)
class CommandDefinition:
    """A command as registered with the host."""

    name: str
    description: str
    template: str
    agent: str | None = None
    model: str | None = None
    subtask: str | None = None
    argument_hint: str | None = None


@dataclass(frozen=True)
class LoadedCommand:
    """One command file's parse result."""

    name: str
    path: str
    definition: CommandDefinition
    scope: CommandScope
