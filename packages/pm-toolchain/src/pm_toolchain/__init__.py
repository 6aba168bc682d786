# SPDX-License-Identifier: MIT
"""Toolchain discovery and build invocation.

This package locates toolchain executables relative to the installation and
wraps the external build tool:
- Configuration from environment overrides and pyproject.toml [tool.pm]
- Executable lookup next to the running front end, with env overrides
- A build wrapper that adds a hint when a companion tool is missing

Example:
    >>> from pm_toolchain import ToolchainResources, load_config
    >>>
    >>> resources = ToolchainResources(load_config())
    >>> resources.compiler
    '/usr/local/toolchain/bin/swiftc'
"""

__version__ = "0.1.0"

from .config import (
    BUILD_TOOL_ENV,
    COMPILER_ENV,
    INSTALL_PATH_ENV,
    SYSROOT_ENV,
    ConfigError,
    ToolchainConfig,
    ToolchainError,
    load_config,
)
from .resources import (
    BUILD_TOOL_NAME,
    COMPILER_NAME,
    TOOL_OVERRIDES,
    ToolchainResources,
    get_main_executable,
    register_main_executable,
    resolve,
)
from .build import (
    COMPANION_TOOL,
    CONFIGURATIONS,
    MISSING_COMPANION_HINT,
    BuildArtifact,
    BuildError,
    BuildParameters,
    Builder,
    describe,
    run_build_tool,
)

__all__ = [
    # Config
    "ToolchainConfig",
    "ToolchainError",
    "ConfigError",
    "load_config",
    "INSTALL_PATH_ENV",
    "COMPILER_ENV",
    "BUILD_TOOL_ENV",
    "SYSROOT_ENV",
    # Resources
    "ToolchainResources",
    "COMPILER_NAME",
    "BUILD_TOOL_NAME",
    "TOOL_OVERRIDES",
    "register_main_executable",
    "get_main_executable",
    "resolve",
    # Build
    "BuildParameters",
    "BuildArtifact",
    "BuildError",
    "Builder",
    "CONFIGURATIONS",
    "COMPANION_TOOL",
    "MISSING_COMPANION_HINT",
    "describe",
    "run_build_tool",
]
