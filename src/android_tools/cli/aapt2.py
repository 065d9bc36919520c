"""CLI commands wrapping aapt2."""

from pathlib import Path

import typer

from android_tools.aapt2 import Aapt2
from android_tools.exceptions import AndroidToolsError, ProcessError
from android_tools.models.options import Aapt2DumpSubcommand
from android_tools.utils.output import console

app = typer.Typer(no_args_is_help=True)


@app.command("dump")
def dump(
    subcommand: Aapt2DumpSubcommand = typer.Argument(
        ...,
        help="What to dump.",
    ),
    apk_path: Path = typer.Argument(
        ...,
        help="Path to the APK.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    no_values: bool = typer.Option(
        False,
        "--no-values",
        help="Suppress the output of values when displaying resources.",
    ),
) -> None:
    """Print information extracted from an APK with `aapt2 dump`."""
    try:
        result = Aapt2().dump(subcommand, apk_path).no_values(no_values).execute()
        typer.echo(result.stdout, nl=False)
    except ProcessError as e:
        console.print_process_error("aapt2", e)
        raise typer.Exit(1) from None
    except AndroidToolsError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None
