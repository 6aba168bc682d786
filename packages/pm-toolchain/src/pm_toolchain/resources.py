# SPDX-License-Identifier: MIT
"""Locate toolchain resources relative to the installed front end.

The install path is computed once per ToolchainResources instance:

1. An explicit install path (``SPM_INSTALL_PATH`` or ``[tool.pm]``), with
   executables in its ``bin`` directory.
2. Two directories above the registered main executable, with executables
   next to it.
3. ``/usr``, with no known executables directory.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Mapping, Optional

from .config import (
    BUILD_TOOL_ENV,
    COMPILER_ENV,
    ToolchainConfig,
    ToolchainError,
)

COMPILER_NAME = "swiftc"
BUILD_TOOL_NAME = "swift-build-tool"
DEFAULT_INSTALL_PATH = Path("/usr")

# Environment variables consulted by the named tool lookups
TOOL_OVERRIDES = {
    COMPILER_NAME: COMPILER_ENV,
    BUILD_TOOL_NAME: BUILD_TOOL_ENV,
}

_registered_main_executable: Optional[Path] = None


def register_main_executable(path: str | Path) -> None:
    """Record the path of the running front-end executable.

    Must be called at most once per process, before resources are used.

    Raises:
        ToolchainError: If a main executable was already registered
    """
    global _registered_main_executable
    if _registered_main_executable is not None:
        raise ToolchainError("Resources already initialized")
    _registered_main_executable = Path(os.path.abspath(path))


def get_main_executable() -> Optional[Path]:
    """Return the registered main executable path, if any."""
    return _registered_main_executable


class ToolchainResources:
    """Paths of the toolchain installation and its executables."""

    def __init__(
        self,
        config: Optional[ToolchainConfig] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.config = config if config is not None else ToolchainConfig.from_environ(environ)
        self._environ = os.environ if environ is None else environ
        self._paths: Optional[tuple[Path, Optional[Path]]] = None

    def _computed_paths(self) -> tuple[Path, Optional[Path]]:
        if self._paths is None:
            self._paths = self._compute_paths()
        return self._paths

    def _compute_paths(self) -> tuple[Path, Optional[Path]]:
        if self.config.install_path is not None:
            return self.config.install_path, self.config.install_path / "bin"

        main_executable = self.config.main_executable or get_main_executable()
        if main_executable is not None:
            executables = Path(os.path.normpath(Path(main_executable).parent))
            return executables.parent, executables

        return DEFAULT_INSTALL_PATH, None

    @property
    def install_path(self) -> Path:
        """The expected install path."""
        return self._computed_paths()[0]

    @property
    def executables_path(self) -> Optional[Path]:
        """The directory containing toolchain executables, if known."""
        return self._computed_paths()[1]

    @property
    def runtime_lib_path(self) -> Path:
        """The package manager runtime library directory."""
        return self.install_path / "lib" / "swift" / "pm"

    def find_executable(self, name: str) -> str:
        """Search for an executable next to the main executable.

        Returns:
            The path to the executable in the executables directory if it
            exists there, otherwise the bare name (left to PATH lookup).
        """
        executables = self.executables_path
        if executables is not None:
            candidate = executables / name
            if candidate.exists():
                return str(candidate)
        return name

    def resolve(self, name: str, env_var: Optional[str] = None) -> str:
        """Resolve an executable name, honoring an override.

        Args:
            name: Executable name, e.g. "swiftc"
            env_var: Environment variable holding an explicit path. The
                compiler and build tool use their configured overrides when
                this is not given.

        Returns:
            The override if set, else the result of find_executable
        """
        return self._override(name, env_var) or self.find_executable(name)

    def _override(self, name: str, env_var: Optional[str]) -> Optional[str]:
        if env_var is not None:
            return self._environ.get(env_var) or None
        if name == COMPILER_NAME:
            return self.config.compiler
        if name == BUILD_TOOL_NAME:
            return self.config.build_tool
        return None

    def override_source(self, name: str, env_var: Optional[str] = None) -> Optional[str]:
        """Describe where the override used by resolve comes from.

        Returns:
            The environment variable name, "[tool.pm]" for a pyproject
            value, or None when resolve falls back to find_executable
        """
        override = self._override(name, env_var)
        if override is None:
            return None
        variable = env_var or TOOL_OVERRIDES.get(name)
        if variable is not None and self._environ.get(variable) == override:
            return variable
        return "[tool.pm]"

    @property
    def compiler(self) -> str:
        """Path of the compiler (``SWIFT_EXEC`` override)."""
        return self.resolve(COMPILER_NAME)

    @property
    def build_tool(self) -> str:
        """Path of the low-level build tool (``SWIFT_BUILD_TOOL`` override)."""
        return self.resolve(BUILD_TOOL_NAME)

    @property
    def sysroot(self) -> Optional[str]:
        """SDK root: the ``SYSROOT`` override, else the macOS SDK via xcrun."""
        if self.config.sysroot:
            return self.config.sysroot
        if sys.platform != "darwin":
            return None
        return _xcrun("--show-sdk-path")

    @property
    def platform_path(self) -> Optional[str]:
        """The macOS SDK platform directory, or None elsewhere."""
        if sys.platform != "darwin":
            return None
        return _xcrun("--show-sdk-platform-path")


def _xcrun(flag: str) -> Optional[str]:
    try:
        result = subprocess.run(
            ["xcrun", "--sdk", "macosx", flag],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def resolve(name: str, env_var: Optional[str] = None) -> str:
    """Resolve an executable using the current environment.

    Examples:
        >>> resolve("swiftc")  # doctest: +SKIP
        '/opt/toolchain/bin/swiftc'
    """
    return ToolchainResources().resolve(name, env_var)

