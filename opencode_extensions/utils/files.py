"""Filesystem helpers."""
from typing import Protocol

MARKDOWN_SUFFIX = ".md"


class DirEntryLike(Protocol):
    """The parts of ``os.DirEntry`` the filters rely on."""

    name: str

    def is_file(self) -> bool: ...


def is_markdown_file(entry: DirEntryLike) -> bool:
    """Check if a directory entry is a regular ``.md`` file."""
    return entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX)
