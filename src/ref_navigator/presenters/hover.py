"""Render resolved references for hover and go-to-definition."""

import re

from pydantic import BaseModel

from ref_navigator.models import ResolvedTarget, SourceSpan

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-!.])")

NO_METADATA = "_No schema metadata available._"
OPEN_HINT = "Cmd+Click to open the referenced schema."


class DefinitionLocation(BaseModel):
    uri: str
    path: str
    target_span: SourceSpan
    origin_span: SourceSpan | None = None


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def truncate_text(text: str, max_length: int = 280) -> str:
    return f"{text[: max_length - 1]}…" if len(text) > max_length else text


def target_link(target: ResolvedTarget) -> str:
    uri = target.target_document.uri
    return f"{uri}#{target.pointer_fragment}" if target.pointer_fragment else uri


def render_hover(target: ResolvedTarget, max_length: int = 280) -> str:
    header = f"{target.target_document.name}{target.pointer_display}"
    parts = [f"[{escape_markdown(header)}]({target_link(target)})\n\n"]

    details: list[str] = []
    for label, value in (
        ("Title", target.metadata.title),
        ("Description", target.metadata.description),
        ("Type", target.metadata.type),
    ):
        if value:
            details.append(f"- **{label}:** {escape_markdown(truncate_text(value, max_length))}")

    parts.append("\n".join(details) if details else NO_METADATA)
    parts.append(f"\n\n{OPEN_HINT}")
    return "".join(parts)


def definition_location(target: ResolvedTarget) -> DefinitionLocation:
    return DefinitionLocation(
        uri=target.target_document.uri,
        path=target.target_document.path,
        target_span=target.target_span,
        origin_span=target.source_span,
    )
