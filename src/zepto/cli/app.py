"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="zepto",
        help="A tiny terminal text viewer.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def edit(
        path: Annotated[Optional[Path], typer.Argument(help="File to open (starts empty if omitted)")] = None,
    ) -> None:
        """Open PATH in the terminal viewer. Press Ctrl-Q to quit."""
        from zepto.cli.studio.editor import run_editor
        from zepto.config import EditorConfig
        from zepto.errors import ZeptoError
        from zepto.log import configure_logging

        try:
            config = EditorConfig.from_env()
        except ValueError as e:
            console.print(f"[red]Invalid configuration:[/] {escape(str(e))}", highlight=False)
            raise typer.Exit(1)
        configure_logging(config)

        try:
            run_editor(path, config)
        except ZeptoError as e:
            console.print(f"[red]{escape(str(e))}[/]", highlight=False)
            raise typer.Exit(1)

    return app
