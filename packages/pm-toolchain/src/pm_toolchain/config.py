# SPDX-License-Identifier: MIT
"""Toolchain configuration from the environment and pyproject.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

# Environment overrides
INSTALL_PATH_ENV = "SPM_INSTALL_PATH"
COMPILER_ENV = "SWIFT_EXEC"
BUILD_TOOL_ENV = "SWIFT_BUILD_TOOL"
SYSROOT_ENV = "SYSROOT"

# Keys accepted in [tool.pm]
_PYPROJECT_KEYS = {
    "install-path": "install_path",
    "compiler": "compiler",
    "build-tool": "build_tool",
    "sysroot": "sysroot",
}


class ToolchainError(Exception):
    """Base class for toolchain lookup and build failures."""

    pass


class ConfigError(ToolchainError):
    """Raised when toolchain configuration loading fails."""

    pass


@dataclass(frozen=True)
class ToolchainConfig:
    """Where to find the toolchain.

    Attributes:
        install_path: Root of the toolchain installation (executables in bin/)
        compiler: Explicit path of the compiler executable
        build_tool: Explicit path of the low-level build tool
        sysroot: SDK root passed to the compiler
        main_executable: Path of the running front-end executable; the
            install path is derived from it when install_path is unset
    """

    install_path: Optional[Path] = None
    compiler: Optional[str] = None
    build_tool: Optional[str] = None
    sysroot: Optional[str] = None
    main_executable: Optional[Path] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "ToolchainConfig":
        """Read overrides from environment variables.

        Empty variables are treated as unset.
        """
        environ = os.environ if environ is None else environ

        install_path = environ.get(INSTALL_PATH_ENV) or None
        return cls(
            install_path=Path(install_path) if install_path else None,
            compiler=environ.get(COMPILER_ENV) or None,
            build_tool=environ.get(BUILD_TOOL_ENV) or None,
            sysroot=environ.get(SYSROOT_ENV) or None,
        )

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "ToolchainConfig":
        """Load configuration from the [tool.pm] table of pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            ToolchainConfig instance

        Raises:
            ConfigError: If the file is invalid or a value has the wrong type
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "ToolchainConfig":
        """Create a ToolchainConfig from a parsed pyproject.toml dictionary.

        A relative install-path is resolved against project_dir.
        """
        tool_pm = pyproject.get("tool", {}).get("pm", {})
        if not isinstance(tool_pm, dict):
            raise ConfigError("[tool.pm] must be a table")

        values: dict[str, Any] = {}
        for key, attr in _PYPROJECT_KEYS.items():
            if key not in tool_pm:
                continue
            value = tool_pm[key]
            if not isinstance(value, str):
                raise ConfigError(
                    f"tool.pm.{key} must be a string, got {type(value).__name__}"
                )
            values[attr] = value

        unknown = sorted(set(tool_pm) - set(_PYPROJECT_KEYS))
        if unknown:
            raise ConfigError(f"Unknown key(s) in [tool.pm]: {', '.join(unknown)}")

        if "install_path" in values:
            install_path = Path(values["install_path"])
            if project_dir is not None and not install_path.is_absolute():
                install_path = project_dir / install_path
            values["install_path"] = install_path

        return cls(**values)

    def merged(self, overrides: "ToolchainConfig") -> "ToolchainConfig":
        """Return a copy where every value set in overrides wins."""
        values = {}
        for f in fields(self):
            override = getattr(overrides, f.name)
            values[f.name] = override if override is not None else getattr(self, f.name)
        return ToolchainConfig(**values)


def load_config(
    project_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ToolchainConfig:
    """Load toolchain configuration.

    Values from pyproject.toml in project_dir (when present) are overlaid by
    environment variables.

    Args:
        project_dir: Project directory, defaults to the current directory
        environ: Environment mapping, defaults to os.environ

    Returns:
        The effective ToolchainConfig
    """
    project_dir = Path(project_dir) if project_dir is not None else Path.cwd()

    config = ToolchainConfig()
    if (project_dir / "pyproject.toml").exists():
        config = ToolchainConfig.from_pyproject(project_dir)

    return config.merged(ToolchainConfig.from_environ(environ))
