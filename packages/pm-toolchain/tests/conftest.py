# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for toolchain tests."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path
from typing import Callable

import pytest

from pm_toolchain import resources as resources_module


@pytest.fixture(autouse=True)
def clean_toolchain_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove toolchain overrides and any registered main executable."""
    for name in ("SPM_INSTALL_PATH", "SWIFT_EXEC", "SWIFT_BUILD_TOOL", "SYSROOT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(resources_module, "_registered_main_executable", None)


@pytest.fixture
def make_executable(tmp_path: Path) -> Callable[..., Path]:
    """Create a shell script executable in a directory."""
    if sys.platform == "win32":
        pytest.skip("shell script executables require a POSIX platform")

    def _make(name: str, directory: Path | None = None, exit_code: int = 0, output: str = "") -> Path:
        directory = directory or tmp_path / "bin"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(f"#!/bin/sh\necho '{output}'\necho \"$@\" >&2\nexit {exit_code}\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make


@pytest.fixture
def empty_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point PATH at an empty directory."""
    directory = tmp_path / "empty-path"
    directory.mkdir()
    monkeypatch.setenv("PATH", str(directory))
    return directory


@pytest.fixture
def path_with(monkeypatch: pytest.MonkeyPatch, make_executable) -> Callable[..., Path]:
    """Put a directory with the given executable first on PATH."""

    def _with(name: str, **kwargs) -> Path:
        path = make_executable(name, **kwargs)
        monkeypatch.setenv("PATH", str(path.parent) + os.pathsep + os.environ.get("PATH", ""))
        return path

    return _with
