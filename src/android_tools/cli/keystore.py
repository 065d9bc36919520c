"""CLI commands for signing keystores."""

from pathlib import Path

import typer

from android_tools.exceptions import AndroidToolsError
from android_tools.java_tools import gen_key
from android_tools.models.keystore import DEFAULT_KEY_ALIAS, DEFAULT_KEY_PASS, Key
from android_tools.utils.output import console

app = typer.Typer(no_args_is_help=True)


@app.command("generate")
def generate(
    path: Path = typer.Option(
        None,
        "--path",
        "-p",
        help="Keystore file or directory [default: ~/.android/aab.keystore].",
    ),
    alias: str = typer.Option(
        DEFAULT_KEY_ALIAS,
        "--alias",
        "-a",
        help="Key alias.",
    ),
    password: str = typer.Option(
        DEFAULT_KEY_PASS,
        "--password",
        help="Store and key password.",
    ),
) -> None:
    """Generate a debug signing key with keytool."""
    try:
        key_path = path if path is not None else Key.default().key_path
        key = Key(key_path=key_path, key_alias=alias, key_pass=password)
        with console.status("Generating keystore..."):
            key = gen_key(key)
        console.print_success(f"Keystore written to {key.keystore}")
    except AndroidToolsError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None
