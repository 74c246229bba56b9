"""Test plugin wiring."""
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from opencode_extensions.config.settings import CONFIG_PATH_ENV
from opencode_extensions.plugin import create_plugin


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Home and project directories with a command in each scope dir."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    (home / ".claude" / "commands").mkdir(parents=True)
    (home / ".config" / "opencode").mkdir(parents=True)
    (project / ".claude" / "commands").mkdir(parents=True)
    (project / ".opencode").mkdir(parents=True)

    (home / ".claude" / "commands" / "review.md").write_text(
        "---\ndescription: Review\n---\nReview it."
    )
    (project / ".claude" / "commands" / "test.md").write_text("Run tests.")

    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    monkeypatch.chdir(project)
    return home, project


@pytest.fixture
def ctx(workspace):
    _, project = workspace
    ctx = MagicMock()
    ctx.directory = str(project)
    ctx.client.tui.show_toast = AsyncMock()
    return ctx


def test_create_plugin_loads_commands(ctx):
    plugin = create_plugin(ctx, AsyncMock(return_value="1.0.0"))

    assert set(plugin.commands) == {"review", "test"}
    assert plugin.commands["review"].description == "(user) Review"
    assert "event" in plugin.hooks


def test_create_plugin_respects_scopes(ctx, workspace):
    _, project = workspace
    (project / ".opencode" / "opencode-extensions.yaml").write_text(
        "commands:\n  scopes: [project]\n"
    )

    plugin = create_plugin(ctx, AsyncMock())

    assert set(plugin.commands) == {"test"}


def test_create_plugin_commands_disabled(ctx, workspace):
    _, project = workspace
    (project / ".opencode" / "opencode-extensions.yaml").write_text(
        "commands:\n  enabled: false\n"
    )

    plugin = create_plugin(ctx, AsyncMock())

    assert plugin.commands == {}


def test_create_plugin_auto_update_disabled(ctx, workspace):
    home, _ = workspace
    (home / ".config" / "opencode" / "opencode-extensions.yaml").write_text(
        "auto_update:\n  enabled: false\n"
    )

    plugin = create_plugin(ctx, AsyncMock())

    assert plugin.hooks == {}


@pytest.mark.asyncio
async def test_plugin_event_uses_pinned_version(ctx, workspace):
    """Pinned version from config reaches the startup toast."""
    home, _ = workspace
    (home / ".config" / "opencode" / "opencode-extensions.yaml").write_text(
        "auto_update:\n  pinned_version: 0.2.0\n"
    )
    fetch = AsyncMock(return_value="9.9.9")
    plugin = create_plugin(ctx, fetch)

    await plugin.event({"type": "session.created"})

    fetch.assert_not_awaited()
    toast = ctx.client.tui.show_toast.await_args.kwargs
    assert toast["title"] == "OpenCode Extensions 0.2.0"


@pytest.mark.asyncio
async def test_plugin_event_without_hooks(ctx, workspace):
    home, _ = workspace
    (home / ".config" / "opencode" / "opencode-extensions.yaml").write_text(
        "auto_update:\n  enabled: false\n"
    )
    plugin = create_plugin(ctx, AsyncMock())

    await plugin.event({"type": "session.created"})

    ctx.client.tui.show_toast.assert_not_awaited()
