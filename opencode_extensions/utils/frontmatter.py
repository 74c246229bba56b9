"""Markdown frontmatter parsing."""
import re
from dataclasses import dataclass, field

import yaml

FRONTMATTER_PATTERN = re.compile(r"^---\r?\n(.*?)\r?\n---(?:\r?\n|$)", re.DOTALL)


@dataclass
class ParsedFrontmatter:
    """Result of splitting a file into metadata and body."""

    data: dict[str, str] = field(default_factory=dict)
    body: str = ""


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _parse_lines(block: str) -> dict[str, str]:
    """Read ``key: value`` lines, splitting on the first colon."""
    data: dict[str, str] = {}
    for line in block.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or ":" not in stripped:
            continue
        key, value = stripped.split(":", 1)
        key = key.strip()
        if key:
            data[key] = _strip_quotes(value.strip())
    return data


def _parse_block(block: str) -> dict[str, str]:
    # BaseLoader keeps every scalar as a string
    try:
        loaded = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError:
        return _parse_lines(block)

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        return _parse_lines(block)

    return {
        str(key): value
        for key, value in loaded.items()
        if isinstance(value, str)
    }


def parse_frontmatter(content: str) -> ParsedFrontmatter:
    """Split a leading ``---`` metadata block from the body.

    Args:
        content: Full text of the file.

    Returns:
        ParsedFrontmatter with raw string values and the untrimmed body.
        Content without a complete block is returned whole as the body.
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return ParsedFrontmatter(data={}, body=content)

    return ParsedFrontmatter(
        data=_parse_block(match.group(1)),
        body=content[match.end():],
    )
