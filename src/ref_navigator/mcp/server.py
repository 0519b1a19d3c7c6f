"""FastMCP server exposing reference lookup and validation tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from ref_navigator.core.documents import TextDocument
from ref_navigator.core.lookup import lookup_at
from ref_navigator.core.ports.loader import DocumentLoader
from ref_navigator.core.scanner import (
    scan_document as _scan_document,
)
from ref_navigator.presenters.hover import definition_location, render_hover
from ref_navigator.settings import Settings


def create_mcp_server(loader: DocumentLoader, settings: Settings | None = None) -> FastMCP:
    """Create a FastMCP server that reads documents through ``loader``."""

    settings = settings or Settings()
    mcp = FastMCP("ref-navigator", instructions="Resolve and validate $ref pointers in JSON schema files.")

    def _read(path: str) -> TextDocument:
        return TextDocument.from_file(path, encoding=settings.encoding)

    @mcp.tool()
    async def scan_document(path: str) -> list[dict[str, Any]]:
        """Validate every $ref in a JSON document and list the broken ones."""
        findings = await _scan_document(_read(path), loader)
        return [
            {
                "line": f.span.start.row + 1,
                "column": f.span.start.column + 1,
                "reference": f.reference,
                "code": f.code.value,
                "message": f.message,
            }
            for f in findings
        ]

    @mcp.tool()
    async def lookup_reference(path: str, offset: int) -> str:
        """Describe the schema a $ref at the given byte offset points to."""
        target = await lookup_at(_read(path), offset, loader)
        if target is None:
            return "No resolvable reference at this position."
        return render_hover(target, settings.hover_max_length)

    @mcp.tool()
    async def find_definition(path: str, offset: int) -> dict[str, Any] | None:
        """Return the file and range a $ref at the given byte offset points to."""
        target = await lookup_at(_read(path), offset, loader)
        if target is None:
            return None
        return definition_location(target).model_dump(mode="json")

    return mcp
