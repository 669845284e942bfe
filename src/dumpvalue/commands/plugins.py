"""Plugins command -- list the project plugin links of a configuration file."""

from __future__ import annotations

import typer

from dumpvalue.exceptions import DumpValueError
from dumpvalue.output import debug, error, print_table

DEFAULT_SECTION = "projectPlugins"


def plugins_command(
    ctx: typer.Context,
    section: str = typer.Option(
        DEFAULT_SECTION, "--section", "-s", help="Tag of the plugin section."
    ),
) -> None:
    """List the plugin links declared in the configuration file.

    Example::

        dumpvalue --config web.config plugins
        dumpvalue --json plugins --section dashboardPlugins
    """
    from dumpvalue.config import resolve_config_path
    from dumpvalue.parser import find_section, load_config_document, parse_project_plugins

    cli_config = ctx.obj.get("config") if ctx.obj else None
    try:
        config_path = resolve_config_path(cli_config)
        debug(f"Loading configuration from {config_path}")
        root = load_config_document(config_path)
        links = parse_project_plugins(find_section(root, section))
    except DumpValueError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    rows = [[link.display_text, link.url] for link in links]
    print_table(["Text", "URL"], rows, title=section)
