"""Markdown command loading."""
from .models import (
    COMMAND_SCOPES,
    CommandDefinition,
    CommandFrontmatter,
    CommandScope,
    LoadedCommand,
)
from .discovery import (
    commands_to_record,
    load_commands_from_dir,
    load_opencode_global_commands,
    load_opencode_project_commands,
    load_project_commands,
    load_user_commands,
    parse_command_file,
    wrap_template,
)
from .registry import CommandRegistry

__all__ = [
    "COMMAND_SCOPES",
    "CommandDefinition",
    "CommandFrontmatter",
    "CommandScope",
    "LoadedCommand",
    "commands_to_record",
    "load_commands_from_dir",
    "load_opencode_global_commands",
    "load_opencode_project_commands",
    "load_project_commands",
    "load_user_commands",
    "parse_command_file",
    "wrap_template",
    "CommandRegistry",
]
