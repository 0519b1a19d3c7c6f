import asyncio
from pathlib import Path
from typing import Annotated

import typer

from ref_navigator.cli.render import console, render_findings
from ref_navigator.core.documents import TextDocument
from ref_navigator.core.languages import collect_documents
from ref_navigator.core.workspace import ReferenceWorkspace
from ref_navigator.diagnostics.memory import InMemoryDiagnosticCollection
from ref_navigator.loaders.filesystem import FileSystemLoader
from ref_navigator.models import DocumentIdentity
from ref_navigator.settings import load_settings
from ref_navigator.watcher.watchfiles_adapter import ChangeCallback, WatchfilesWatcher


def build_change_handler(workspace: ReferenceWorkspace, encoding: str = "utf-8") -> ChangeCallback:
    async def _on_change(changed: set[Path], deleted: set[Path]) -> None:
        for path in sorted(deleted):
            workspace.close(DocumentIdentity.from_path(path))
        for path in sorted(changed):
            try:
                document = TextDocument.from_file(path, encoding=encoding)
            except (OSError, ValueError):
                workspace.close(DocumentIdentity.from_path(path))
                continue
            await workspace.change(document)

        # Documents referencing a changed or deleted file are re-checked as well.
        findings = await workspace.validate_all()
        if findings:
            render_findings(findings)
        else:
            console.print("[green]All references resolve.[/green]")

    return _on_change


def watch(
    directory: Annotated[Path, typer.Argument(help="Directory to watch.")] = Path("."),
) -> None:
    """Re-validate JSON documents whenever they change."""
    if not directory.is_dir():
        console.print(f"[red]Not a directory:[/red] {directory}")
        raise typer.Exit(2)

    settings = load_settings()
    workspace = ReferenceWorkspace(FileSystemLoader(settings.encoding), InMemoryDiagnosticCollection())

    async def _run() -> None:
        for path in collect_documents([directory]):
            findings = await workspace.open(TextDocument.from_file(path, encoding=settings.encoding))
            if findings:
                render_findings(findings)

        watcher = WatchfilesWatcher(directory, build_change_handler(workspace, settings.encoding))
        await watcher.start()
        console.print(f"[green]Watching {directory} (Ctrl+C to stop)[/green]")
        try:
            await watcher.wait()
        finally:
            await watcher.stop()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("Stopped.")
