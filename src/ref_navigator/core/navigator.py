from collections.abc import Sequence

from ref_navigator.core.pointer import PointerSegment
from ref_navigator.core.syntax import SyntaxTree
from ref_navigator.models import NodeKind, SyntaxNode


def _child_for_segment(tree: SyntaxTree, node: SyntaxNode, segment: PointerSegment) -> SyntaxNode | None:
    if node.kind is NodeKind.OBJECT:
        # Integer segments still address keys such as "0" on objects.
        key = str(segment)
        for prop in tree.children(node):
            if tree.property_key(prop) == key:
                return tree.property_value(prop)
        return None

    if node.kind is NodeKind.ARRAY:
        if not isinstance(segment, int) or segment >= len(node.children):
            return None
        return tree.nodes[node.children[segment]]

    return None


def find_node(tree: SyntaxTree, path: Sequence[PointerSegment]) -> SyntaxNode | None:
    """Return the node addressed by ``path``, or None if it does not resolve."""
    node = tree.root
    for segment in path:
        child = _child_for_segment(tree, node, segment)
        if child is None:
            return None
        node = child

    if node.kind is NodeKind.PROPERTY:
        return tree.property_value(node)
    return node
