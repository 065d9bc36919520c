"""Root CLI application for android-tools."""

import typer

from android_tools import __version__
from android_tools.cli import aapt2, keystore, sdk
from android_tools.utils.output import console

app = typer.Typer(
    name="android-tools",
    help="Typed wrappers around the Android SDK command-line tools.",
    no_args_is_help=True,
)

# Register subcommands
app.add_typer(sdk.app, name="sdk", help="Locate SDK and JDK tools")
app.add_typer(keystore.app, name="keystore", help="Create signing keystores")
app.add_typer(aapt2.app, name="aapt2", help="Run aapt2 subcommands")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"android-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print every command before it runs.",
    ),
) -> None:
    """android-tools - drive aapt2, adb, bundletool and friends."""
    console.set_verbose(verbose)


if __name__ == "__main__":
    app()
