"""CLI adapter for ``accumulo_client_config`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators inspect which files a client would read and what the effective
configuration is, without writing Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata.
* :func:`cli_search_path` – prints the candidate files as JSON.
* :func:`cli_show` – loads the configuration and prints it as properties or
  JSON (optionally with provenance).
* :func:`cli_get` – prints one effective value, defaults applied.
* :func:`cli_properties` – prints the property catalogue as JSON.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It calls the composition root
(:mod:`accumulo_client_config.core`) and never reaches into adapter details.
``lib_cli_exit_tools`` centralises the exit code strategy.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .adapters.env.default import SystemEnvironment
from .core import default_search_path, load_default
from .domain.properties import ClientProperty

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
_DIST_NAME: Final[str] = "accumulo-client-config"

FORMAT_CHOICES: Final[tuple[str, ...]] = ("properties", "json")


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when not installed."""

    try:
        return metadata.version(_DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Inspect Accumulo client configuration",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="accumulo-client-config",
    message="accumulo-client-config version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata(_DIST_NAME)
    except metadata.PackageNotFoundError:
        click.echo(f"{_DIST_NAME} (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', _DIST_NAME)}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("search-path", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--readable-only/--all",
    default=False,
    help="List only candidates that exist and are readable",
)
def cli_search_path(readable_only: bool) -> None:
    """Print the candidate configuration files, highest precedence first."""

    environment = SystemEnvironment()
    paths = default_search_path(environment)
    if readable_only:
        paths = [path for path in paths if environment.is_readable(path)]
    click.echo(json.dumps(paths, indent=2))


@cli.command("show", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--file",
    "override_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Read only this file instead of the search path",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default="properties",
    show_default=True,
    help="Output format",
)
@click.option(
    "--provenance/--no-provenance",
    default=False,
    help="Include the source of each key (json format only)",
)
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Pretty-print JSON output with the provided indent size",
)
def cli_show(
    override_file: Optional[Path],
    output_format: str,
    provenance: bool,
    indent: Optional[int],
) -> None:
    """Load the effective configuration and print its stored values.

    The properties format is exactly what ``ClientConfiguration.serialize``
    produces and can be fed back through ``deserialize``.
    """

    config = load_default(str(override_file) if override_file is not None else None)
    if output_format.lower() == "properties":
        click.echo(config.serialize(), nl=False)
        return
    if provenance:
        payload = {"config": config.as_dict(), "provenance": {key: config.origin(key) for key in config}}
        click.echo(json.dumps(payload, indent=indent, separators=(",", ":")))
        return
    click.echo(config.to_json(indent=indent))


@cli.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option(
    "--file",
    "override_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Read only this file instead of the search path",
)
@click.pass_context
def cli_get(ctx: click.Context, key: str, override_file: Optional[Path]) -> None:
    """Print the effective value of KEY, falling back to its registered default."""

    config = load_default(str(override_file) if override_file is not None else None)
    value = config.get(key)
    if value is None:
        click.echo(f"{key} is not set and has no default", err=True)
        ctx.exit(1)
    click.echo(value)


@cli.command("properties", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--indent",
    type=int,
    default=2,
    show_default=True,
    help="Indent size for the JSON output",
)
def cli_properties(indent: int) -> None:
    """Print every recognised property with its default, type and description."""

    catalogue = [
        {
            "name": prop.name,
            "key": prop.key,
            "default": prop.default_value,
            "type": str(prop.type),
            "description": prop.description,
            "mirrors_server": prop.canonical_source is not None,
        }
        for prop in ClientProperty
    ]
    click.echo(json.dumps(catalogue, indent=indent))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="accumulo-client-config",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
