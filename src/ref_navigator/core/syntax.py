"""Parse JSON/JSONC text into an arena-backed syntax tree.

The concrete syntax comes from tree-sitter's JSON grammar, which also accepts
``//`` and ``/* */`` comments. Nodes are stored in pre-order in a flat list;
parent and child links are indices into that list.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from functools import lru_cache

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from ref_navigator.models import NodeKind, SyntaxNode

_NODE_KINDS: dict[str, NodeKind] = {
    "object": NodeKind.OBJECT,
    "array": NodeKind.ARRAY,
    "pair": NodeKind.PROPERTY,
    "string": NodeKind.STRING,
    "number": NodeKind.NUMBER,
    "true": NodeKind.BOOLEAN,
    "false": NodeKind.BOOLEAN,
    "null": NodeKind.NULL,
}


class _MalformedTree(Exception):
    pass


@lru_cache(maxsize=1)
def get_json_parser() -> Parser:
    return get_parser("json")


class SyntaxTree:
    def __init__(self, nodes: list[SyntaxNode]) -> None:
        if not nodes:
            raise ValueError("A syntax tree needs at least a root node.")
        self.nodes = nodes

    @property
    def root(self) -> SyntaxNode:
        return self.nodes[0]

    def parent(self, node: SyntaxNode) -> SyntaxNode | None:
        return self.nodes[node.parent] if node.parent is not None else None

    def children(self, node: SyntaxNode) -> list[SyntaxNode]:
        return [self.nodes[i] for i in node.children]

    def property_key(self, node: SyntaxNode) -> str | None:
        """Return the key of a property node, or None for any other kind."""
        if node.kind is not NodeKind.PROPERTY:
            return None
        key = self.nodes[node.children[0]]
        return key.value if isinstance(key.value, str) else None

    def property_value(self, node: SyntaxNode) -> SyntaxNode | None:
        if node.kind is not NodeKind.PROPERTY or len(node.children) < 2:
            return None
        return self.nodes[node.children[1]]

    def walk(self) -> Iterator[SyntaxNode]:
        """Yield every node in pre-order."""
        stack = [self.root.index]
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))

    def node_at_offset(self, offset: int) -> SyntaxNode | None:
        """Return the innermost node whose extent covers ``offset``.

        The right bound is inclusive. When two siblings share a boundary the
        later one wins.
        """
        node = self.root
        if not _contains(node, offset):
            return None
        while True:
            for index in reversed(node.children):
                child = self.nodes[index]
                if _contains(child, offset):
                    node = child
                    break
            else:
                return node


def _contains(node: SyntaxNode, offset: int) -> bool:
    return node.offset <= offset <= node.end


def parse_tree(text: str) -> SyntaxTree | None:
    """Parse ``text``; return None when it is not a single well-formed JSON value."""
    source = text.encode("utf-8")
    document = get_json_parser().parse(source).root_node
    if document.has_error:
        return None

    values = [child for child in document.named_children if child.type != "comment"]
    if len(values) != 1:
        return None

    try:
        return SyntaxTree(_build_nodes(values[0], source))
    except _MalformedTree:
        return None


def _build_nodes(top: Node, source: bytes) -> list[SyntaxNode]:
    nodes: list[SyntaxNode] = []
    stack: list[tuple[Node, int | None]] = [(top, None)]
    while stack:
        ts_node, parent = stack.pop()
        kind = _NODE_KINDS.get(ts_node.type)
        if kind is None:
            raise _MalformedTree(ts_node.type)

        index = len(nodes)
        nodes.append(
            SyntaxNode(
                index=index,
                kind=kind,
                offset=ts_node.start_byte,
                length=ts_node.end_byte - ts_node.start_byte,
                value=_scalar_value(kind, ts_node, source),
                parent=parent,
            )
        )
        if parent is not None:
            nodes[parent].children.append(index)

        stack.extend((child, index) for child in reversed(_syntax_children(kind, ts_node)))
    return nodes


def _syntax_children(kind: NodeKind, ts_node: Node) -> list[Node]:
    if kind is NodeKind.PROPERTY:
        key = ts_node.child_by_field_name("key")
        value = ts_node.child_by_field_name("value")
        if key is None or value is None or key.type != "string":
            raise _MalformedTree("pair")
        return [key, value]
    if kind in (NodeKind.OBJECT, NodeKind.ARRAY):
        return [child for child in ts_node.named_children if child.type != "comment"]
    return []


def _scalar_value(kind: NodeKind, ts_node: Node, source: bytes) -> str | int | float | bool | None:
    if kind is NodeKind.BOOLEAN:
        return ts_node.type == "true"
    if kind in (NodeKind.STRING, NodeKind.NUMBER):
        raw = source[ts_node.start_byte : ts_node.end_byte].decode("utf-8")
        try:
            value = json.loads(raw, strict=False)
        except ValueError:
            raise _MalformedTree(raw) from None
        return value
    return None
