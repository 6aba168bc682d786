# SPDX-License-Identifier: MIT
"""Parse, validate and order semantic versions."""

from __future__ import annotations

import json

import click

from pm_version import (
    MalformedVersionError,
    Version,
    compare_versions,
    parse_version,
    try_parse_version,
    version_key,
)

from ..main import Context, echo_error, echo_info, echo_success, pass_context


def _parse_or_exit(text: str) -> Version:
    try:
        return parse_version(text)
    except MalformedVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)


def _describe(version: Version) -> dict:
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": list(version.prerelease_identifiers),
        "build": version.build_metadata_identifier,
        "canonical": str(version),
    }


@click.command()
@click.argument("version_string", metavar="VERSION")
@click.option("--json", "as_json", is_flag=True, help="Print the fields as JSON.")
def parse(version_string: str, as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        pm parse 1.0.0-rc.1+build.5
        pm parse --json 2.1.0
    """
    version = _parse_or_exit(version_string)
    fields = _describe(version)

    if as_json:
        click.echo(json.dumps(fields, indent=2))
        return

    echo_info(f"major:      {fields['major']}")
    echo_info(f"minor:      {fields['minor']}")
    echo_info(f"patch:      {fields['patch']}")
    echo_info(f"prerelease: {'.'.join(fields['prerelease']) if fields['prerelease'] else '-'}")
    echo_info(f"build:      {fields['build'] if fields['build'] is not None else '-'}")


@click.command()
@click.argument("versions", metavar="VERSION...", nargs=-1, required=True)
@pass_context
def check(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that every VERSION is a well-formed version string.

    Exits with status 1 if any of them is malformed.
    """
    failures = 0
    for text in versions:
        version = try_parse_version(text)
        if version is None:
            echo_error(f"Malformed version string: {text!r}")
            failures += 1
        elif ctx.verbose:
            echo_info(f"{text}: ok")

    if failures:
        raise SystemExit(1)

    echo_success(f"{len(versions)} version(s) valid")


@click.command()
@click.argument("first", metavar="A")
@click.argument("second", metavar="B")
@click.option(
    "--strict",
    is_flag=True,
    help="Print '~' instead of '=' when A and B differ only in build metadata.",
)
def compare(first: str, second: str, strict: bool) -> None:
    """Compare versions A and B by precedence.

    Prints '<', '=' or '>'. Build metadata does not affect precedence.
    """
    a = _parse_or_exit(first)
    b = _parse_or_exit(second)

    result = compare_versions(a, b)
    if result < 0:
        click.echo("<")
    elif result > 0:
        click.echo(">")
    elif strict and a != b:
        click.echo("~")
    else:
        click.echo("=")


@click.command()
@click.argument("versions", metavar="VERSION...", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Highest precedence first.")
def sort(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONs ordered by precedence, one per line.

    Versions with equal precedence keep their input order.
    """
    parsed = [_parse_or_exit(text) for text in versions]
    for version in sorted(parsed, key=version_key, reverse=reverse):
        click.echo(str(version))


@click.command("next")
@click.argument("version_string", metavar="VERSION")
def next_version(version_string: str) -> None:
    """Print the version after VERSION (next patch number)."""
    click.echo(str(_parse_or_exit(version_string).successor()))


@click.command("prev")
@click.argument("version_string", metavar="VERSION")
def prev_version(version_string: str) -> None:
    """Print the version before VERSION (previous patch number)."""
    version = _parse_or_exit(version_string)
    if (version.major, version.minor, version.patch) == (0, 0, 0):
        echo_error(f"{version} has no predecessor")
        raise SystemExit(1)
    click.echo(str(version.predecessor()))
