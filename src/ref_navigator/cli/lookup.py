import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.markdown import Markdown

from ref_navigator.cli.render import console
from ref_navigator.core.documents import TextDocument
from ref_navigator.core.lookup import lookup_at
from ref_navigator.loaders.filesystem import FileSystemLoader
from ref_navigator.models import Position
from ref_navigator.presenters.hover import definition_location, render_hover
from ref_navigator.settings import load_settings


def lookup(
    path: Annotated[Path, typer.Argument(help="Document containing the reference.")],
    offset: Annotated[int | None, typer.Option(help="Byte offset of the cursor.")] = None,
    line: Annotated[int | None, typer.Option(help="1-based line of the cursor.")] = None,
    column: Annotated[int, typer.Option(help="1-based byte column of the cursor.")] = 1,
    definition: Annotated[bool, typer.Option("--definition", help="Print the target location only.")] = False,
) -> None:
    """Resolve the $ref under the cursor and describe its target."""
    settings = load_settings()
    if offset is None and line is None:
        console.print("[red]Either --offset or --line is required.[/red]")
        raise typer.Exit(2)
    if not path.is_file():
        console.print(f"[red]No such file:[/red] {path}")
        raise typer.Exit(2)

    document = TextDocument.from_file(path, encoding=settings.encoding)
    if offset is None:
        assert line is not None
        offset = document.offset_at(Position(row=line - 1, column=column - 1))

    target = asyncio.run(lookup_at(document, offset, FileSystemLoader(settings.encoding)))
    if target is None:
        console.print("[yellow]No resolvable reference at this position.[/yellow]")
        raise typer.Exit(1)

    if definition:
        location = definition_location(target)
        start = location.target_span.start
        typer.echo(f"{location.path}:{start.row + 1}:{start.column + 1}")
        return

    console.print(Markdown(render_hover(target, settings.hover_max_length)))
