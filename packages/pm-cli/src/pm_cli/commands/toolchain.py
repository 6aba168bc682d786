# SPDX-License-Identifier: MIT
"""Locate toolchain executables and run the build tool."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from pm_toolchain import (
    CONFIGURATIONS,
    BuildError,
    BuildParameters,
    ConfigError,
    ToolchainResources,
    describe,
)

from ..main import Context, echo_error, echo_info, echo_success, echo_warning, pass_context


def _resources_or_exit(ctx: Context) -> ToolchainResources:
    try:
        return ToolchainResources(ctx.load_config())
    except ConfigError as e:
        echo_error(f"Configuration error: {e}")
        raise SystemExit(1)


@click.command()
@click.argument("name")
@click.option(
    "--env",
    "env_var",
    metavar="VAR",
    help="Environment variable holding an explicit path for NAME.",
)
@pass_context
def which(ctx: Context, name: str, env_var: Optional[str]) -> None:
    """Print the resolved path of toolchain executable NAME.

    The bare name is printed when it cannot be found next to the toolchain.

    \b
    Examples:
        pm which swiftc
        pm which clang --env CLANG_PATH
    """
    resources = _resources_or_exit(ctx)

    if ctx.verbose:
        echo_info(f"Install path: {resources.install_path}")
        echo_info(f"Executables: {resources.executables_path or '(unknown)'}")
        source = resources.override_source(name, env_var)
        if source == "[tool.pm]":
            echo_info("Override from [tool.pm]")
        elif source:
            echo_info(f"Override variable: {source}")

    click.echo(resources.resolve(name, env_var))


@click.command()
@click.option(
    "--prefix",
    type=click.Path(file_okay=False, path_type=Path),
    default=".build",
    help="Build directory.",
)
@click.option(
    "--configuration",
    "-c",
    type=click.Choice(CONFIGURATIONS),
    default="debug",
    help="Build configuration.",
)
@click.option("--module", "modules", multiple=True, help="Module to build (repeatable).")
@click.option("--product", "products", multiple=True, help="Product to build (repeatable).")
@click.option("--xcc", multiple=True, metavar="FLAG", help="Pass FLAG to the C compiler.")
@click.option("--xld", multiple=True, metavar="FLAG", help="Pass FLAG to the linker.")
@click.option("--xswiftc", multiple=True, metavar="FLAG", help="Pass FLAG to the compiler.")
@pass_context
def build(
    ctx: Context,
    prefix: Path,
    configuration: str,
    modules: tuple[str, ...],
    products: tuple[str, ...],
    xcc: tuple[str, ...],
    xld: tuple[str, ...],
    xswiftc: tuple[str, ...],
) -> None:
    """Run the build tool on the build description in PREFIX.

    \b
    Examples:
        pm build
        pm build -c release --module core --product main
        pm build --xld -lz --xswiftc -Onone
    """
    resources = _resources_or_exit(ctx)

    if ctx.project_dir is not None and not prefix.is_absolute():
        prefix = ctx.project_dir / prefix

    parameters = BuildParameters(
        prefix=prefix,
        configuration=configuration,
        modules=modules,
        products=products,
        xcc=xcc,
        xld=xld,
        xswiftc=xswiftc,
    )

    if ctx.verbose:
        echo_info(f"Build tool: {resources.build_tool}")
        echo_info(f"Description: {parameters.description_path}")

    try:
        artifact = describe(parameters, resources=resources)
    except BuildError as e:
        echo_error(str(e))
        if e.hint:
            echo_warning(e.hint)
        raise SystemExit(1)

    if artifact.output.strip():
        echo_info(artifact.output.rstrip())
    echo_success(f"Built {parameters.configuration} from {artifact.description}")
