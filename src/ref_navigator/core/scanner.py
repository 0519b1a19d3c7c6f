"""Validate every ``$ref`` in a document."""

import logging

from ref_navigator.core.documents import TextDocument
from ref_navigator.core.errors import (
    MalformedReferenceError,
    PointerNotFoundError,
    TargetNotFoundError,
    UnparsableDocumentError,
    UnsupportedSchemeError,
)
from ref_navigator.core.locator import split_reference
from ref_navigator.core.ports.loader import DocumentLoader
from ref_navigator.core.resolver import resolve_reference
from ref_navigator.core.syntax import SyntaxTree, parse_tree
from ref_navigator.models import FindingCode, NodeKind, SyntaxNode, ValidationFinding

logger = logging.getLogger(__name__)

REF_KEY = "$ref"


def iter_reference_nodes(tree: SyntaxTree) -> list[SyntaxNode]:
    """Return the string value nodes of all non-blank ``$ref`` properties, in pre-order."""
    found: list[SyntaxNode] = []
    for node in tree.walk():
        if tree.property_key(node) != REF_KEY:
            continue
        value = tree.property_value(node)
        if value is not None and value.kind is NodeKind.STRING and str(value.value).strip():
            found.append(value)
    return found


def _finding(document: TextDocument, node: SyntaxNode, code: FindingCode, message: str) -> ValidationFinding:
    return ValidationFinding(
        document=document.identity,
        reference=str(node.value),
        source_node=node,
        span=document.span(node.offset, node.length),
        code=code,
        message=message,
    )


async def check_reference(
    document: TextDocument, node: SyntaxNode, loader: DocumentLoader
) -> ValidationFinding | None:
    raw = str(node.value)
    file_part, pointer_part = split_reference(raw)
    try:
        await resolve_reference(document, raw, loader, source_node=node)
    except (UnsupportedSchemeError, MalformedReferenceError):
        return _finding(document, node, FindingCode.UNRESOLVABLE_REFERENCE, f'Cannot resolve reference: "{raw}"')
    except TargetNotFoundError:
        return _finding(
            document, node, FindingCode.FILE_NOT_FOUND, f'File not found: "{file_part or "current file"}"'
        )
    except (PointerNotFoundError, UnparsableDocumentError):
        # A target that does not parse only matters when a pointer must be walked.
        if not pointer_part:
            return None
        return _finding(document, node, FindingCode.INVALID_POINTER, f'Invalid JSON pointer: "#{pointer_part}"')
    return None


async def scan_document(document: TextDocument, loader: DocumentLoader) -> list[ValidationFinding]:
    """Check every reference in ``document`` and return one finding per broken one.

    Unparsable documents produce no findings.
    """
    tree = parse_tree(document.text)
    if tree is None:
        logger.debug("Skipping %s: not valid JSON", document.identity)
        return []

    findings: list[ValidationFinding] = []
    for node in iter_reference_nodes(tree):
        finding = await check_reference(document, node, loader)
        if finding is not None:
            findings.append(finding)

    logger.debug("Scanned %s: %d finding(s)", document.identity, len(findings))
    return findings
