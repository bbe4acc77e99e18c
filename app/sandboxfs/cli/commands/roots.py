"""Storage roots command.

Shows where the documents, resources, library and temp roots resolve to.
"""

import json
from typing import Annotated

import typer

from sandboxfs.cli.types import OutputFormat, open_manager
from sandboxfs.utils.formatting import console, create_roots_table

app = typer.Typer(
    name="roots",
    help="Show the storage roots.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def roots(
    ctx: typer.Context,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the four storage roots and whether each exists.

    Examples:
        sandboxfs roots
        sandboxfs roots --format json
    """
    if ctx.invoked_subcommand is not None:
        return

    manager = open_manager(ctx)
    paths = manager.roots.as_dict()

    if output_format == OutputFormat.JSON:
        data = {
            name: {"path": path, "exists": manager.exists(path)} for name, path in paths.items()
        }
        console.print_json(json.dumps(data))
        return

    table = create_roots_table()
    for name, path in paths.items():
        mark = "[success]yes[/]" if manager.exists(path) else "[muted]no[/]"
        table.add_row(name, path, mark)
    console.print(table)
