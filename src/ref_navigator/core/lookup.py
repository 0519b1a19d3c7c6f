import logging

from ref_navigator.core.documents import TextDocument
from ref_navigator.core.errors import ReferenceResolutionError
from ref_navigator.core.ports.loader import DocumentLoader
from ref_navigator.core.resolver import resolve_reference
from ref_navigator.core.scanner import REF_KEY
from ref_navigator.core.syntax import SyntaxTree, parse_tree
from ref_navigator.models import NodeKind, ResolvedTarget, SyntaxNode

logger = logging.getLogger(__name__)


def reference_node_at(tree: SyntaxTree, offset: int) -> SyntaxNode | None:
    """Return the ``$ref`` string value covering ``offset``, if any."""
    node = tree.node_at_offset(offset)
    if node is None or node.kind is not NodeKind.STRING:
        return None

    parent = tree.parent(node)
    if parent is None or tree.property_key(parent) != REF_KEY:
        return None
    if parent.children[1] != node.index:
        return None
    return node


async def lookup_at(document: TextDocument, offset: int, loader: DocumentLoader) -> ResolvedTarget | None:
    """Resolve the reference under ``offset`` for hover and go-to-definition.

    Every failure yields None; broken references are reported by the scanner.
    """
    tree = parse_tree(document.text)
    if tree is None:
        return None

    node = reference_node_at(tree, offset)
    if node is None:
        return None

    raw = str(node.value)
    if not raw.strip():
        return None

    try:
        return await resolve_reference(document, raw, loader, source_node=node)
    except ReferenceResolutionError as exc:
        logger.debug("Lookup of %r in %s failed: %s", raw, document.identity, exc)
        return None
