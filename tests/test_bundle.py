"""Tests for bundle assembly, request payload and debug output."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from quickstart_context.bundle import build_context_bundle, build_request_body, write_debug_files
from quickstart_context.config import Settings
from quickstart_context.data import MissingInputError

NOW = 1_700_003_600


@pytest.fixture
def project(tmp_path, history_file):
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text("print('hi')\n")
    (tmp_path / "src" / "cli.py").write_text("")
    (tmp_path / ".env").write_text("DATABASE_URL=sqlite://\nSECRET=abc\n")
    hist = history_file([
        ":1699990000:0;old command",
        ":1700000000:0;pip install -e .",
        ":1700003000:1;pytest",
    ])
    settings = Settings(max_file_context=1, time_back_hours=1, history_path=hist)
    return tmp_path, settings


def test_build_context_bundle(project):
    root, settings = project

    bundle = build_context_bundle(settings, root=root, now=NOW)

    assert [c.command for c in bundle.commands] == ["pytest", "pip install -e ."]
    assert bundle.commands[0].exit_code == "1"
    assert bundle.cutoff_timestamp == 1_700_000_000
    assert bundle.project_files == [Path("pyproject.toml"), Path("src/app.py")]
    assert bundle.file_contents[1].content == "print('hi')\n"
    assert bundle.env_keys == ["DATABASE_URL", "SECRET"]


def test_missing_env_file_degrades(project, caplog):
    root, settings = project
    (root / ".env").unlink()

    with caplog.at_level(logging.WARNING, logger="quickstart_context.bundle"):
        bundle = build_context_bundle(settings, root=root, now=NOW)

    assert bundle.env_keys == []
    assert "Continuing without env structure" in caplog.text


def test_missing_history_is_fatal(project):
    root, settings = project
    settings.history_path = root / "no_history"

    with pytest.raises(MissingInputError):
        build_context_bundle(settings, root=root, now=NOW)


def test_request_body(project):
    root, settings = project
    bundle = build_context_bundle(settings, root=root, now=NOW)

    body = build_request_body(bundle, "gpt-4o")

    assert body["model"] == "gpt-4o"
    messages = body["messages"]
    assert len(messages) == 8
    assert [m["role"] for m in messages] == [
        "system", "user", "system", "user", "user", "user", "user", "system",
    ]
    assert messages[3]["content"].startswith("My shell history contained this for 1 hours:")
    assert '"command": "pytest"' in messages[3]["content"]
    assert "src/app.py" in messages[4]["content"]
    assert '"DATABASE_URL"' in messages[6]["content"]
    assert "abc" not in messages[6]["content"]


def test_write_debug_files(project, tmp_path_factory):
    root, settings = project
    out = tmp_path_factory.mktemp("out")
    bundle = build_context_bundle(settings, root=root, now=NOW)
    body = build_request_body(bundle, "gpt-4o")

    written = write_debug_files(bundle, body, out)

    assert [p.name for p in written] == [
        "command_history.json",
        "project_files_content.json",
        "env_file_keys.json",
        "request.json",
    ]
    history = json.loads((out / "command_history.json").read_text())
    assert history[0] == {
        "timestamp": "2023-11-14 23:03:20",
        "relative_time": "10m",
        "exit_code": "1",
        "command": "pytest",
    }
    contents = json.loads((out / "project_files_content.json").read_text())
    assert contents[0]["file_path"] == "pyproject.toml"
    assert json.loads((out / "env_file_keys.json").read_text()) == ["DATABASE_URL", "SECRET"]
    assert json.loads((out / "request.json").read_text()) == body
