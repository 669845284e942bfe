"""Dump commands -- run ``dumpValue`` tasks, write ad-hoc values, show dump files.

Provides the top-level ``dumpvalue run``, ``dumpvalue write`` and
``dumpvalue show`` commands. Errors raised by the library are reported on
stderr and turned into the exit code of the matching
:class:`~dumpvalue.exceptions.DumpValueError` subclass.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from dumpvalue.exceptions import DumpValueError, InvalidUsageError
from dumpvalue.models import NamedValue
from dumpvalue.output import debug, error, info, print_table, success, warning


def parse_value_pair(pair: str, literal_encoding: bool = True) -> NamedValue:
    """Parse a ``NAME=VALUE`` command-line argument.

    Only the first ``=`` separates name from value, so values may contain
    ``=`` themselves.

    Raises:
        InvalidUsageError: If there is no ``=`` or the name is empty.
    """
    name, sep, value = pair.partition("=")
    if not sep or not name:
        raise InvalidUsageError(f"Expected NAME=VALUE, got {pair!r}")
    return NamedValue(name=name, value=value, literal_encoding=literal_encoding)


def run_command(
    ctx: typer.Context,
    working_dir: Optional[str] = typer.Option(
        None,
        "--working-dir",
        "-w",
        help="Directory relative xmlFileName paths are resolved against.",
    ),
) -> None:
    """Execute every <dumpValue> task in the configuration file.

    Example::

        dumpvalue --config ccnet.config run
        dumpvalue run --working-dir /builds/project
    """
    from dumpvalue.config import resolve_config_path
    from dumpvalue.parser import find_sections, load_config_document
    from dumpvalue.parser.tasks import TASK_ELEMENT
    from dumpvalue.tasks import DumpValueTask

    cli_config = ctx.obj.get("config") if ctx.obj else None
    try:
        config_path = resolve_config_path(cli_config)
        debug(f"Loading configuration from {config_path}")
        root = load_config_document(config_path)
        tasks = [DumpValueTask.from_element(node) for node in find_sections(root, TASK_ELEMENT)]
        if not tasks:
            warning(f"No <{TASK_ELEMENT}> tasks in {config_path}")
            return
        base = Path(working_dir) if working_dir else config_path.parent
        for task in tasks:
            info(task.start_message())
            written = task.run(working_directory=base)
            success(f"Wrote {len(task.config.items)} value(s) to {written}")
    except DumpValueError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def write_command(
    output: str = typer.Argument(help="XML file to create or overwrite."),
    pairs: Optional[list[str]] = typer.Argument(
        None, help="Values as NAME=VALUE, written in the order given."
    ),
    no_cdata: bool = typer.Option(
        False, "--no-cdata", help="Store values as escaped text instead of CDATA."
    ),
) -> None:
    """Write NAME=VALUE pairs to a value-dump XML file.

    Example::

        dumpvalue write values.xml Build=42 "Label=release 1.0"
        dumpvalue write values.xml --no-cdata Query="a < b"
    """
    from dumpvalue.export import write_values

    try:
        items = [parse_value_pair(pair, literal_encoding=not no_cdata) for pair in pairs or []]
        written = write_values(items, output)
    except DumpValueError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    success(f"Wrote {len(items)} value(s) to {written}")


def show_command(
    dump_file: str = typer.Argument(help="Value-dump XML file to read."),
) -> None:
    """Print the values stored in a value-dump file.

    Example::

        dumpvalue show values.xml
        dumpvalue --json show values.xml
    """
    from dumpvalue.export import read_values

    try:
        values = read_values(dump_file)
    except DumpValueError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    rows = [
        [item.name, item.value, "yes" if item.literal_encoding else "no"]
        for item in values
    ]
    print_table(["Name", "Value", "CDATA"], rows, title=dump_file)
