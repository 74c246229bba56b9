"""Validation for the ``model`` frontmatter field."""
import re

# provider/model-id, e.g. "anthropic/claude-sonnet-4" or "openai/gpt-4.1"
MODEL_PATTERN = re.compile(r"^[A-Za-z0-9][\w.-]*/[\w.:@+-][\w.:@+/-]*$")


def sanitize_model_field(raw: object) -> str | None:
    """Return the trimmed model identifier, or None if it is not usable.

    Bare names (Claude Code aliases like ``sonnet`` or ``inherit``) carry no
    provider and are rejected.
    """
    if not isinstance(raw, str):
        return None

    model = raw.strip()
    if not model:
        return None

    if not MODEL_PATTERN.match(model):
        return None

    return model
