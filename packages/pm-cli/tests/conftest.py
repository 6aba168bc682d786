# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import stat
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from pm_toolchain import resources as resources_module


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_toolchain(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test from an empty directory without toolchain overrides."""
    for name in ("SPM_INSTALL_PATH", "SWIFT_EXEC", "SWIFT_BUILD_TOOL", "SYSROOT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(resources_module, "_registered_main_executable", None)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def toolchain_dir(tmp_path: Path) -> Path:
    """Create a toolchain installation with executable stubs in bin/."""
    if sys.platform == "win32":
        pytest.skip("shell script executables require a POSIX platform")

    root = tmp_path / "toolchain"
    bin_dir = root / "bin"
    bin_dir.mkdir(parents=True)
    for name, body in {
        "swiftc": "exit 0",
        "swift-build-tool": 'echo "compiling $3"\nexit 0',
    }.items():
        path = bin_dir / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return root


@pytest.fixture
def temp_project(tmp_path: Path, toolchain_dir: Path) -> Path:
    """Create a project directory whose pyproject.toml points at the toolchain."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        f"""[project]
name = "test-package"
version = "1.0.0"

[tool.pm]
install-path = "{toolchain_dir.as_posix()}"
"""
    )
    return project_dir
