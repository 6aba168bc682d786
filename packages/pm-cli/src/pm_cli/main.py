# SPDX-License-Identifier: MIT
"""CLI entry point for the pm command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from pm_toolchain import (
    ConfigError,
    ToolchainConfig,
    get_main_executable,
    load_config,
    register_main_executable,
)


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[ToolchainConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> ToolchainConfig:
        """Load toolchain configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="pm-tools")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [tool.pm] configuration from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version and toolchain utility.

    Parse and order semantic versions, locate toolchain executables and run
    the build tool.

    \b
    Examples:
        pm parse 1.0.0-rc.1+build.5
        pm compare 1.0.0-beta.2 1.0.0-beta.11
        pm sort 1.0.0 1.0.0-alpha 0.9.9
        pm which swiftc
        pm build --configuration release
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import toolchain, version

cli.add_command(version.parse)
cli.add_command(version.check)
cli.add_command(version.compare)
cli.add_command(version.sort)
cli.add_command(version.next_version)
cli.add_command(version.prev_version)
cli.add_command(toolchain.which)
cli.add_command(toolchain.build)


def main() -> None:
    """Main entry point for the CLI."""
    if get_main_executable() is None:
        register_main_executable(sys.argv[0])
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
