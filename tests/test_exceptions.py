"""Test custom exceptions."""
import pytest

from opencode_extensions.exceptions import (
    CommandLoadError,
    ConfigError,
    ExtensionError,
    UpdateCheckError,
)


def test_base_exception():
    """ExtensionError is base for all custom exceptions."""
    with pytest.raises(ExtensionError):
        raise ExtensionError("test")


def test_config_error_inherits():
    err = ConfigError("bad config")
    assert isinstance(err, ExtensionError)
    assert str(err) == "bad config"


def test_update_check_error_inherits():
    assert isinstance(UpdateCheckError("offline"), ExtensionError)


def test_command_load_error_fields():
    """CommandLoadError carries the file path and reason."""
    err = CommandLoadError("/cmds/review.md", "Permission denied")

    assert isinstance(err, ExtensionError)
    assert err.path == "/cmds/review.md"
    assert err.reason == "Permission denied"
    assert str(err) == "/cmds/review.md: Permission denied"
