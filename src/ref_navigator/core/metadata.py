from ref_navigator.core.syntax import SyntaxTree
from ref_navigator.models import NodeKind, SchemaMetadata, SyntaxNode


def extract_metadata(tree: SyntaxTree, node: SyntaxNode) -> SchemaMetadata:
    """Collect ``title``, ``description`` and ``type`` from a schema object.

    Only direct properties are read. Later duplicates overwrite earlier ones.
    """
    metadata = SchemaMetadata()
    if node.kind is not NodeKind.OBJECT:
        return metadata

    for prop in tree.children(node):
        key = tree.property_key(prop)
        value = tree.property_value(prop)
        if key is None or value is None:
            continue

        if key in ("title", "description"):
            if value.kind is NodeKind.STRING:
                setattr(metadata, key, value.value)
        elif key == "type":
            if value.kind is NodeKind.STRING:
                metadata.type = str(value.value)
            elif value.kind is NodeKind.ARRAY:
                types = [str(item.value) for item in tree.children(value) if item.kind is NodeKind.STRING]
                if types:
                    metadata.type = " | ".join(types)

    return metadata
