"""CLI adapter for ``lib_json_config`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the document operations through a command line interface so operators
can inspect and patch JSON configuration files without writing Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_get` / :func:`cli_set` – nested path access on a file.
* :func:`cli_merge` – deep-merge one file into another.
* :func:`cli_match` – resolve an abbreviated top-level key.
* :func:`cli_translate` – copy values between files through a path table.
* :func:`cli_compare_types` – report kind mismatches against a reference file.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It calls the composition root and the
public operations and never reaches into adapter internals.
``lib_cli_exit_tools`` centralises the exit code strategy so all commands behave
consistently across shells and CI.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .adapters.json_codec.default import parse_value, render_value
from .application.translation import DEFAULT_SEPARATOR, Translation
from .core import read_config, write_config

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

_EXISTING_FILE = click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False, readable=True)
_INDENT_OPTION = click.option(
    "--indent",
    type=int,
    default=None,
    help="Pretty-print JSON output with the provided indent size",
)


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` when not installed."""

    try:
        return metadata.version("lib_json_config")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Nested key-path toolkit for JSON configuration files",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_json_config",
    message="lib_json_config version %(version)s",
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
        meta = metadata.metadata("lib_json_config")
    except metadata.PackageNotFoundError:
        click.echo("lib_json_config (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_json_config')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("file", type=_EXISTING_FILE)
@click.argument("keys", nargs=-1, required=True)
@_INDENT_OPTION
def cli_get(file: Path, keys: Sequence[str], indent: Optional[int]) -> None:
    """Print the JSON value stored under KEYS in FILE.

    Examples
    --------
    ``lib_json_config get config.json service timeout`` prints ``5``.
    """

    value, found = read_config(str(file)).lookup(*keys)
    if not found:
        raise click.ClickException(f"key path {'/'.join(keys)} not found in {file}")
    click.echo(render_value(value, indent=indent))


@cli.command("set", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("file", type=_EXISTING_FILE)
@click.argument("keys", nargs=-1, required=True)
@click.option("--value", "raw_value", required=True, help="JSON literal to store (quote strings: '\"text\"')")
@_INDENT_OPTION
def cli_set(file: Path, keys: Sequence[str], raw_value: str, indent: Optional[int]) -> None:
    """Store a JSON literal under KEYS in FILE, creating parents as needed."""

    config = read_config(str(file))
    config.assign(parse_value(raw_value), *keys)
    write_config(config, str(file), indent=indent)


@cli.command("merge", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("target", type=_EXISTING_FILE)
@click.argument("source", type=_EXISTING_FILE)
@click.option(
    "--output",
    type=click.Path(path_type=Path, file_okay=True, dir_okay=False),
    default=None,
    help="Write the merged document here instead of overwriting TARGET",
)
@_INDENT_OPTION
def cli_merge(target: Path, source: Path, output: Optional[Path], indent: Optional[int]) -> None:
    """Deep-merge SOURCE into TARGET; values from SOURCE win."""

    config = read_config(str(target))
    config.merge(read_config(str(source)))
    write_config(config, str(output or target), indent=indent)


@cli.command("match", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("file", type=_EXISTING_FILE)
@click.argument("shortcut")
@click.option("--ignore", default="", help="Characters to ignore while matching (e.g. '_-')")
def cli_match(file: Path, shortcut: str, ignore: str) -> None:
    """Print the single top-level key of FILE that SHORTCUT abbreviates."""

    match = read_config(str(file)).unique_key_match_of(shortcut, ignore)
    if not match:
        raise click.ClickException(f"{shortcut!r} matches no key or more than one key in {file}")
    click.echo(match)


@cli.command("translate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=_EXISTING_FILE)
@click.argument("destination", type=_EXISTING_FILE)
@click.option(
    "--map",
    "mappings",
    multiple=True,
    required=True,
    help="SOURCE_PATH=DEST_PATH entry (repeatable)",
)
@click.option("--sep", default=DEFAULT_SEPARATOR, show_default=True, help="Path segment separator")
@click.option(
    "--output",
    type=click.Path(path_type=Path, file_okay=True, dir_okay=False),
    default=None,
    help="Write the result here instead of overwriting DESTINATION",
)
@_INDENT_OPTION
def cli_translate(
    source: Path,
    destination: Path,
    mappings: Sequence[str],
    sep: str,
    output: Optional[Path],
    indent: Optional[int],
) -> None:
    """Copy values from SOURCE into DESTINATION according to --map entries."""

    translation = _parse_mappings(mappings)
    target = read_config(str(destination))
    translation.apply(read_config(str(source)), target, sep)
    write_config(target, str(output or destination), indent=indent)


@cli.command("compare-types", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("subject", type=_EXISTING_FILE)
@click.argument("reference", type=_EXISTING_FILE)
@_INDENT_OPTION
@click.pass_context
def cli_compare_types(ctx: click.Context, subject: Path, reference: Path, indent: Optional[int]) -> None:
    """Report keys of SUBJECT whose kinds differ from REFERENCE or are unknown to it.

    Exits with status 1 when any finding is reported.
    """

    report = read_config(str(subject)).compare_types(read_config(str(reference)))
    payload = {"mismatches": report.mismatches, "not_found": report.not_found}
    click.echo(json.dumps(payload, indent=indent, separators=(",", ":")))
    if not report.ok:
        ctx.exit(1)


def _parse_mappings(values: Sequence[str]) -> Translation:
    """Build a :class:`Translation` from ``SRC=DST`` strings."""

    translation = Translation()
    for entry in values:
        source_path, separator, destination_path = entry.partition("=")
        if not separator or not source_path.strip() or not destination_path.strip():
            raise click.BadParameter(
                f"Mapping {entry!r} must look like SOURCE_PATH=DEST_PATH.",
                param_hint="--map",
            )
        translation[source_path.strip()] = destination_path.strip()
    return translation


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_json_config",
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
