"""Built-in CLI commands registered on the root Typer application."""
