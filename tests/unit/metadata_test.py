"""Unit tests for schema metadata extraction."""

from ref_navigator.core.metadata import extract_metadata
from ref_navigator.core.syntax import parse_tree
from ref_navigator.models import SchemaMetadata


def _extract(text: str) -> SchemaMetadata:
    tree = parse_tree(text)
    assert tree is not None
    return extract_metadata(tree, tree.root)


def test_title_and_type_union() -> None:
    metadata = _extract('{"title": "Foo", "type": ["string", "null"]}')
    assert metadata == SchemaMetadata(title="Foo", type="string | null")


def test_all_fields() -> None:
    metadata = _extract('{"title": "Pet", "description": "A pet.", "type": "object"}')
    assert metadata.title == "Pet"
    assert metadata.description == "A pet."
    assert metadata.type == "object"


def test_non_object_is_empty() -> None:
    assert _extract('["title", "type"]').is_empty()
    assert _extract('"string"').is_empty()


def test_non_string_values_are_ignored() -> None:
    metadata = _extract('{"title": 42, "description": null, "type": {"const": "x"}}')
    assert metadata.is_empty()


def test_type_array_without_strings_is_unset() -> None:
    assert _extract('{"type": [1, null]}').type is None


def test_type_array_skips_non_strings() -> None:
    assert _extract('{"type": ["integer", 5, "string"]}').type == "integer | string"


def test_last_duplicate_wins() -> None:
    assert _extract('{"title": "First", "title": "Second"}').title == "Second"


def test_nested_properties_are_not_read() -> None:
    metadata = _extract('{"properties": {"title": {"type": "string"}}}')
    assert metadata.is_empty()


def test_unknown_keys_are_ignored() -> None:
    metadata = _extract('{"$id": "x", "examples": [], "type": "number"}')
    assert metadata == SchemaMetadata(type="number")
