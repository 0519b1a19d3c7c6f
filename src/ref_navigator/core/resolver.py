from ref_navigator.core.documents import TextDocument
from ref_navigator.core.errors import (
    DocumentLoadError,
    PointerNotFoundError,
    TargetNotFoundError,
    UnparsableDocumentError,
)
from ref_navigator.core.locator import LocatedReference, locate_reference
from ref_navigator.core.metadata import extract_metadata
from ref_navigator.core.navigator import find_node
from ref_navigator.core.ports.loader import DocumentLoader
from ref_navigator.core.syntax import parse_tree
from ref_navigator.models import ResolvedTarget, SyntaxNode


async def load_target(document: TextDocument, located: LocatedReference, loader: DocumentLoader) -> TextDocument:
    """Load the document a located reference points into.

    Self references reuse the in-memory text of ``document``.
    """
    if located.target == document.identity:
        return document
    try:
        text = await loader.load(located.target)
    except DocumentLoadError as exc:
        raise TargetNotFoundError(located.raw, exc.path) from exc
    return TextDocument(located.target, text)


async def resolve_reference(
    document: TextDocument,
    raw: str,
    loader: DocumentLoader,
    source_node: SyntaxNode | None = None,
) -> ResolvedTarget:
    """Resolve ``raw`` (a ``$ref`` value found in ``document``) to its target.

    Raises a ``ReferenceResolutionError`` subclass describing the first step
    that failed: locating, loading, parsing or walking the pointer.
    """
    located = locate_reference(document.identity, raw)
    target_document = await load_target(document, located, loader)

    tree = parse_tree(target_document.text)
    if tree is None:
        raise UnparsableDocumentError(raw, located.target.path)

    target_node = find_node(tree, located.path)
    if target_node is None:
        raise PointerNotFoundError(raw, located.pointer_part)

    return ResolvedTarget(
        reference=raw,
        source_span=document.span(source_node.offset, source_node.length) if source_node else None,
        target_document=located.target,
        target_node=target_node,
        target_span=target_document.span(target_node.offset, target_node.length),
        metadata=extract_metadata(tree, target_node),
        pointer_display=located.pointer_display,
        pointer_fragment=located.pointer_part or None,
    )
