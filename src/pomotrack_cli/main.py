"""Main entry point for pomotrack."""

import typer

from pomotrack_cli import __version__
from pomotrack_cli.commands import config_command
from pomotrack_cli.commands.run_command import run_command
from pomotrack_cli.utils.ui.console import get_console

app = typer.Typer(
    name="pomotrack",
    help="Pomodoro timer that tracks time spent on each task",
    no_args_is_help=True,
)

console = get_console()


# Add subcommands
app.add_typer(config_command.app, name="config", help="Configuration management")
app.command("run")(run_command)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]pomotrack[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
