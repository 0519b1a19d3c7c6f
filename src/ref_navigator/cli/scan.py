import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer

from ref_navigator.cli.render import console, render_findings
from ref_navigator.core.documents import TextDocument
from ref_navigator.core.languages import collect_documents
from ref_navigator.core.scanner import scan_document
from ref_navigator.loaders.filesystem import FileSystemLoader
from ref_navigator.models import ValidationFinding
from ref_navigator.settings import load_settings


async def scan_paths(paths: list[Path], encoding: str = "utf-8") -> list[ValidationFinding]:
    loader = FileSystemLoader(encoding)
    findings: list[ValidationFinding] = []
    for path in collect_documents(paths):
        try:
            document = TextDocument.from_file(path, encoding=encoding)
        except (OSError, ValueError) as exc:
            console.print(f"[red]Cannot read[/red] {path}: {exc}")
            continue
        findings.extend(await scan_document(document, loader))
    return findings


def scan(
    paths: Annotated[list[Path], typer.Argument(help="JSON files or directories to scan.")],
    as_json: Annotated[bool, typer.Option("--json", help="Print findings as JSON.")] = False,
) -> None:
    """Validate every $ref in the given documents."""
    settings = load_settings()
    missing = [p for p in paths if not p.exists()]
    if missing:
        for path in missing:
            console.print(f"[red]No such file or directory:[/red] {path}")
        raise typer.Exit(2)

    findings = asyncio.run(scan_paths(paths, settings.encoding))

    if as_json:
        typer.echo(json.dumps([f.model_dump(mode="json", exclude={"source_node"}) for f in findings], indent=2))
    elif findings:
        render_findings(findings)
    else:
        console.print("[green]All references resolve.[/green]")

    if findings:
        raise typer.Exit(1)
