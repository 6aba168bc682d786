# SPDX-License-Identifier: MIT
"""Thin wrapper around the external build tool.

``describe`` forwards to a builder and, when the build fails on Linux
without a C++ linker driver on PATH, re-raises the failure with a hint.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .config import ToolchainError
from .resources import ToolchainResources

# Linking needs clang++ on Linux; its absence makes the compiler fail with an
# unhelpful message.
COMPANION_TOOL = "clang++"
MISSING_COMPANION_HINT = "clang++ not found: this will cause build failure"

CONFIGURATIONS = ("debug", "release")


class BuildError(ToolchainError):
    """Raised when the build tool cannot run or exits with an error.

    Attributes:
        returncode: Exit status of the build tool, if it ran
        hint: Diagnostic hint about a likely cause, if one is known
    """

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        hint: Optional[str] = None,
    ):
        self.returncode = returncode
        self.hint = hint
        super().__init__(message)


@dataclass(frozen=True)
class BuildParameters:
    """Inputs for one build.

    Attributes:
        prefix: Build directory
        configuration: "debug" or "release"
        modules: Module targets to build
        products: Product targets to link
        xcc: Extra flags passed to the C compiler
        xld: Extra flags passed to the linker
        xswiftc: Extra flags passed to the compiler
    """

    prefix: Path
    configuration: str = "debug"
    modules: tuple[str, ...] = ()
    products: tuple[str, ...] = ()
    xcc: tuple[str, ...] = ()
    xld: tuple[str, ...] = ()
    xswiftc: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.configuration not in CONFIGURATIONS:
            raise ValueError(
                f"Unknown configuration {self.configuration!r}, "
                f"expected one of: {', '.join(CONFIGURATIONS)}"
            )

    @property
    def description_path(self) -> Path:
        """The build description file for this configuration."""
        return self.prefix / f"{self.configuration}.yaml"

    def targets(self) -> list[str]:
        """Build tool targets: modules first, then products."""
        return [*self.modules, *self.products]

    def extra_flags(self) -> list[str]:
        """Pass-through flags in build tool argument form."""
        flags: list[str] = []
        for option, values in (("-Xcc", self.xcc), ("-Xlinker", self.xld), ("-Xswiftc", self.xswiftc)):
            for value in values:
                flags.extend([option, value])
        return flags


@dataclass(frozen=True)
class BuildArtifact:
    """Result of a successful build.

    Attributes:
        description: Path of the build description that was built
        command: The command line that was run
        output: Captured standard output of the build tool
    """

    description: Path
    command: tuple[str, ...]
    output: str = ""


Builder = Callable[[BuildParameters], BuildArtifact]


def run_build_tool(
    parameters: BuildParameters,
    resources: Optional[ToolchainResources] = None,
) -> BuildArtifact:
    """Run the build tool on the description for the given parameters.

    Args:
        parameters: Build inputs
        resources: Toolchain lookup, defaults to the current environment

    Returns:
        BuildArtifact describing what was run

    Raises:
        BuildError: If the tool is missing or exits with a non-zero status
    """
    resources = resources or ToolchainResources()
    tool = resources.build_tool
    command = [tool, "-f", str(parameters.description_path)]
    command.extend(parameters.targets())
    command.extend(parameters.extra_flags())

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        raise BuildError(f"Build tool not found: {tool}") from None

    if result.returncode != 0:
        raise BuildError(
            f"Build failed with exit status {result.returncode}:\n{result.stderr}{result.stdout}",
            returncode=result.returncode,
        )

    return BuildArtifact(
        description=parameters.description_path,
        command=tuple(command),
        output=result.stdout,
    )


def describe(
    parameters: BuildParameters,
    builder: Optional[Builder] = None,
    resources: Optional[ToolchainResources] = None,
    platform: Optional[str] = None,
) -> BuildArtifact:
    """Build with the given builder, adding a hint to Linux linker failures.

    Args:
        parameters: Build inputs
        builder: Callable doing the actual build, defaults to run_build_tool
        resources: Toolchain lookup for the default builder
        platform: Platform name, defaults to sys.platform

    Returns:
        The builder's BuildArtifact

    Raises:
        BuildError: The builder's error; with ``hint`` set when clang++ is
            missing on Linux
    """
    platform = platform or sys.platform

    try:
        if builder is None:
            return run_build_tool(parameters, resources)
        return builder(parameters)
    except BuildError as e:
        if platform.startswith("linux") and shutil.which(COMPANION_TOOL) is None:
            raise BuildError(str(e), returncode=e.returncode, hint=MISSING_COMPANION_HINT) from e
        raise
