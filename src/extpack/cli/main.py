"""
CLI main entry point for extpack
"""

import typer

from extpack.cli.commands import inspect
from extpack.core.utils.logger import get_logger

logger = get_logger(__name__)

# Create Typer app
app = typer.Typer(
    name="extpack",
    help="MessagePack extension type tools",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def cli_callback(ctx: typer.Context):
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


app.command(name="inspect", help="Decode a MessagePack file and list its objects")(inspect.inspect)


@app.command()
def version():
    """Show version information."""
    from extpack import __version__
    typer.echo(f"extpack version {__version__}")


if __name__ == "__main__":
    app()
