"""CLI commands for tool discovery."""

import json
import shlex

import typer
from rich.markup import escape
from rich.table import Table

from android_tools.exceptions import AndroidToolsError
from android_tools.models.environment import ToolEnvironment
from android_tools.utils.android_sdk import get_android_home
from android_tools.utils.deps import (
    TOOL_INSTALL_HINTS,
    TOOL_RESOLVERS,
    doctor,
    resolve_tool,
)
from android_tools.utils.output import console

app = typer.Typer(no_args_is_help=True)


@app.command("locate")
def locate(
    tool: str = typer.Argument(
        ...,
        help=f"Tool to resolve: {', '.join(TOOL_RESOLVERS)}.",
    ),
) -> None:
    """Print the command used to invoke a tool."""
    if tool not in TOOL_RESOLVERS:
        console.print_error(f"Unknown tool: {tool}")
        raise typer.Exit(2)

    try:
        typer.echo(shlex.join(resolve_tool(tool)))
    except AndroidToolsError as e:
        console.print_error(str(e))
        raise typer.Exit(1) from None


@app.command("doctor")
def doctor_command(
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON.",
    ),
) -> None:
    """Check every supported tool and show where it resolves to."""
    console.set_json_mode(json_output)

    env = ToolEnvironment.from_os()
    results = doctor(env)

    if json_output:
        output = [result.model_dump(mode="json") for result in results]
        typer.echo(json.dumps(output, indent=2))
    else:
        sdk_root = get_android_home(env)
        console.print_info(f"Android SDK: {sdk_root or 'not found'}")

        table = Table(title="Android tools")
        table.add_column("Tool", style="cyan")
        table.add_column("Status")
        table.add_column("Command / Error")

        for result in results:
            if result.found:
                table.add_row(
                    result.tool,
                    "[green]found[/green]",
                    shlex.join(result.command or []),
                )
            else:
                table.add_row(
                    result.tool,
                    "[red]missing[/red]",
                    escape(result.error or TOOL_INSTALL_HINTS.get(result.tool, "")),
                )

        console.print(table)

    if not all(result.found for result in results):
        raise typer.Exit(1)
