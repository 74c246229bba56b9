"""Utilities module."""
from .files import is_markdown_file
from .frontmatter import ParsedFrontmatter, parse_frontmatter
from .model_sanitizer import sanitize_model_field

__all__ = [
    "is_markdown_file",
    "ParsedFrontmatter",
    "parse_frontmatter",
    "sanitize_model_field",
]
