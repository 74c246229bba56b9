"""Discover and parse markdown command files."""
import logging
import os
from pathlib import Path

from opencode_extensions.exceptions import CommandLoadError
from opencode_extensions.utils import (
    is_markdown_file,
    parse_frontmatter,
    sanitize_model_field,
)

from .models import CommandDefinition, CommandFrontmatter, CommandScope, LoadedCommand

logger = logging.getLogger(__name__)

ARGUMENTS_PLACEHOLDER = "$ARGUMENTS"

TEMPLATE_WRAPPER = """<command-instruction>
{body}
</command-instruction>

<user-request>
$ARGUMENTS
</user-request>"""


def wrap_template(body: str) -> str:
    """Wrap a command body in the instruction and user-request blocks."""
    return TEMPLATE_WRAPPER.format(body=body.strip())


def parse_command_file(path: Path, scope: CommandScope) -> LoadedCommand:
    """Parse a .md command file into a LoadedCommand.

    Args:
        path: Path to the .md file.
        scope: Which well-known directory the file came from.

    Returns:
        Parsed LoadedCommand.
    """
    content = path.read_text(encoding="utf-8")
    name = path.stem  # never taken from frontmatter

    parsed = parse_frontmatter(content)
    frontmatter = CommandFrontmatter.from_data(parsed.data)

    definition = CommandDefinition(
        name=name,
        description=f"({scope}) {frontmatter.description or ''}",
        template=wrap_template(parsed.body),
        agent=frontmatter.agent,
        model=sanitize_model_field(frontmatter.model),
        subtask=frontmatter.subtask,
        argument_hint=frontmatter.argument_hint,
    )

    return LoadedCommand(
        name=name,
        path=str(path),
        definition=definition,
        scope=scope,
    )


def load_commands_from_dir(
    commands_dir: str | Path,
    scope: CommandScope,
    errors: list[CommandLoadError] | None = None,
) -> list[LoadedCommand]:
    """Load every markdown command directly inside a directory.

    Entries keep the directory listing order. A file that cannot be read or
    parsed is skipped, and an unlistable directory yields no commands; when
    ``errors`` is given the failure is appended to it.

    Args:
        commands_dir: Directory to scan (non-recursive).
        scope: Scope tag for the loaded commands.
        errors: Optional list collecting per-file failures.

    Returns:
        Loaded commands, empty if the directory does not exist.
    """
    commands_dir = Path(commands_dir)
    if not commands_dir.is_dir():
        return []

    commands: list[LoadedCommand] = []

    try:
        with os.scandir(commands_dir) as it:
            entries = list(it)
    except OSError as e:
        logger.warning(f"Failed to list commands in {commands_dir}: {e}")
        if errors is not None:
            errors.append(CommandLoadError(str(commands_dir), str(e)))
        return []

    for entry in entries:
        command_path = commands_dir / entry.name
        try:
            if not is_markdown_file(entry):
                continue
            commands.append(parse_command_file(command_path, scope))
        except Exception as e:
            logger.warning(f"Failed to load command {command_path}: {e}")
            if errors is not None:
                errors.append(CommandLoadError(str(command_path), str(e)))

    return commands


def commands_to_record(commands: list[LoadedCommand]) -> dict[str, CommandDefinition]:
    """Key definitions by name; later entries win."""
    result: dict[str, CommandDefinition] = {}
    for cmd in commands:
        result[cmd.name] = cmd.definition
    return result


def user_commands_dir() -> Path:
    return Path.home() / ".claude" / "commands"


def project_commands_dir() -> Path:
    return Path.cwd() / ".claude" / "commands"


def opencode_global_commands_dir() -> Path:
    return Path.home() / ".config" / "opencode" / "command"


def opencode_project_commands_dir() -> Path:
    return Path.cwd() / ".opencode" / "command"


def load_user_commands(
    errors: list[CommandLoadError] | None = None,
) -> dict[str, CommandDefinition]:
    """Load commands from ~/.claude/commands/."""
    commands = load_commands_from_dir(user_commands_dir(), "user", errors)
    return commands_to_record(commands)


def load_project_commands(
    errors: list[CommandLoadError] | None = None,
) -> dict[str, CommandDefinition]:
    """Load commands from ./.claude/commands/."""
    commands = load_commands_from_dir(project_commands_dir(), "project", errors)
    return commands_to_record(commands)


def load_opencode_global_commands(
    errors: list[CommandLoadError] | None = None,
) -> dict[str, CommandDefinition]:
    """Load commands from ~/.config/opencode/command/."""
    commands = load_commands_from_dir(opencode_global_commands_dir(), "opencode", errors)
    return commands_to_record(commands)


def load_opencode_project_commands(
    errors: list[CommandLoadError] | None = None,
) -> dict[str, CommandDefinition]:
    """Load commands from ./.opencode/command/."""
    commands = load_commands_from_dir(
        opencode_project_commands_dir(), "opencode-project", errors
    )
    return commands_to_record(commands)
