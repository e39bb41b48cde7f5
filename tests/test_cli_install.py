# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the install and hooks commands."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pygithook.cli.app import app
from pygithook.hooks import GIT_HOOK_NAMES


@pytest.fixture(autouse=True)
def _clear_skip_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PYGITHOOK_SKIP", raising=False)


def _write_pyproject(root: Path, body: str) -> None:
    (root / "pyproject.toml").write_text(body.strip() + "\n", encoding="utf-8")


def test_install_from_pyproject(project: Path) -> None:
    _write_pyproject(
        project,
        """
[tool.pygithook.hooks]
pre-commit = "echo hello"
""",
    )
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(project), "--no-emoji"])

    assert result.exit_code == 0, result.stdout
    hook = project / ".git" / "hooks" / "pre-commit"
    assert hook.read_bytes() == b"#!/bin/sh\necho hello\n"
    assert os.access(hook, os.X_OK)
    assert "Installed 1 hooks" in result.stdout
    assert "✅" not in result.stdout


def test_install_with_resource_hook_option(project: Path) -> None:
    script = project / "scripts" / "pre-push.sh"
    script.parent.mkdir()
    script.write_text("#!/bin/sh\nmake test\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["install", "--root", str(project), "--resource-hook", "pre-push=scripts/pre-push.sh", "--no-emoji"],
    )

    assert result.exit_code == 0, result.stdout
    assert (project / ".git" / "hooks" / "pre-push").read_bytes() == b"#!/bin/sh\nmake test"


def test_invalid_hook_name_does_not_fail(project: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(project), "--hook", "not-a-real-hook=echo hi", "--no-emoji"])

    assert result.exit_code == 0
    assert "`not-a-real-hook` hook is not a valid git-hook name" in result.stdout
    assert "Skipped invalid hook names: not-a-real-hook" in result.stdout
    assert not (project / ".git" / "hooks" / "not-a-real-hook").exists()


def test_path_escape_fails_the_run(project: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["install", "--root", str(project), "--resource-hook", "pre-push=../../etc/passwd", "--no-emoji"],
    )

    assert result.exit_code == 1
    assert "Only files inside the project" in result.stdout
    assert not (project / ".git" / "hooks" / "pre-push").exists()


def test_missing_repository_fails_the_run(outside_repository: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(outside_repository), "--hook", "pre-commit=true"])

    assert result.exit_code == 1
    assert result.stdout.count("Not a git repository") == 1
    assert "No .git directory found" not in result.stdout


def test_write_failure_fails_the_run(project: Path) -> None:
    hooks_dir = project / ".git" / "hooks"
    (hooks_dir / "pre-commit").mkdir(parents=True)
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["install", "--root", str(project), "--hook", "pre-commit=x", "--hook", "pre-push=y", "--no-emoji"],
    )

    assert result.exit_code == 1
    assert "Could not write hook with name: pre-commit" in result.stdout
    assert not (hooks_dir / "pre-push").exists()


def test_permission_failure_fails_the_run(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def refuse_chmod(self: Path, mode: int, *, follow_symlinks: bool = True) -> None:
        raise PermissionError("chmod refused")

    monkeypatch.setattr(Path, "chmod", refuse_chmod)
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["install", "--root", str(project), "--hook", "pre-commit=x", "--hook", "pre-push=y", "--no-emoji"],
    )

    assert result.exit_code == 1
    assert "Could not set permissions on created file" in result.stdout
    assert not (project / ".git" / "hooks" / "pre-push").exists()


def test_unresolvable_resource_path_fails_the_run(project: Path) -> None:
    (project / ".pygithook.toml").write_text('[resource-hooks]\npre-push = "a\\u0000b"\n', encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(project), "--no-emoji"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Could not access hook resource for pre-push" in result.stdout


def test_skip_flag_is_a_no_op(project: Path) -> None:
    _write_pyproject(project, '[tool.pygithook.hooks]\npre-commit = "echo hello"')
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(project), "--skip", "--no-emoji"])

    assert result.exit_code == 0
    assert "Skipping git hook installation" in result.stdout
    assert not (project / ".git" / "hooks").exists()


def test_skip_environment_variable_is_a_no_op(project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYGITHOOK_SKIP", "true")
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(project), "--hook", "pre-commit=true"])

    assert result.exit_code == 0
    assert not (project / ".git" / "hooks").exists()


def test_dry_run_reports_without_writing(project: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["install", "--root", str(project), "--hook", "pre-commit=true", "--dry-run", "--no-emoji"],
    )

    assert result.exit_code == 0
    assert "Dry run complete: would install 1 hooks" in result.stdout
    assert "DRY RUN: would install" in result.stdout
    assert not (project / ".git" / "hooks").exists()


def test_malformed_hook_option_fails(project: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(project), "--hook", "pre-commit", "--no-emoji"])

    assert result.exit_code == 1
    assert "--hook expects NAME=VALUE" in result.stdout


def test_invalid_configuration_fails(project: Path) -> None:
    (project / ".pygithook.toml").write_text("[hooks]\npre-commit = 1\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(project), "--no-emoji"])

    assert result.exit_code == 1
    assert "Invalid hook configuration" in result.stdout


def test_debug_prints_configuration_sources(project: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["install", "--root", str(project), "--debug", "--no-emoji"])

    assert result.exit_code == 0
    assert "[debug]" in result.stdout
    assert "Built-in defaults" in result.stdout


def test_hooks_command_lists_recognised_names() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["hooks"])

    assert result.exit_code == 0
    assert result.stdout.split() == list(GIT_HOOK_NAMES)
