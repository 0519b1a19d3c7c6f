"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from ref_navigator.models import (
    DocumentIdentity,
    FindingCode,
    NodeKind,
    Position,
    SchemaMetadata,
    Severity,
    SourceSpan,
    SyntaxNode,
    ValidationFinding,
)


class TestPositionModel:
    def test_creates_position_with_valid_data(self) -> None:
        pos = Position(row=0, column=5)
        assert pos.row == 0
        assert pos.column == 5

    def test_position_requires_row(self) -> None:
        with pytest.raises(ValidationError):
            Position(column=5)  # type: ignore[call-arg]


class TestSyntaxNodeModel:
    def test_end_is_offset_plus_length(self) -> None:
        node = SyntaxNode(index=0, kind=NodeKind.STRING, offset=4, length=6, value="abcd")
        assert node.end == 10

    def test_children_default_to_empty(self) -> None:
        node = SyntaxNode(index=0, kind=NodeKind.OBJECT, offset=0, length=2)
        assert node.children == []
        assert node.parent is None

    def test_rejects_unknown_kind(self) -> None:
        with pytest.raises(ValidationError):
            SyntaxNode(index=0, kind="tuple", offset=0, length=2)  # type: ignore[arg-type]


class TestSchemaMetadata:
    def test_empty(self) -> None:
        assert SchemaMetadata().is_empty()

    def test_not_empty(self) -> None:
        assert not SchemaMetadata(type="string").is_empty()


class TestDocumentIdentity:
    def test_is_frozen(self) -> None:
        identity = DocumentIdentity(path="/work/a.json")
        with pytest.raises(ValidationError):
            identity.path = "/work/b.json"  # type: ignore[misc]

    def test_resolve_relative(self) -> None:
        identity = DocumentIdentity(path="/work/schemas/a.json")
        assert identity.resolve("../common/b.json") == DocumentIdentity(path="/work/common/b.json")

    def test_resolve_windows(self) -> None:
        identity = DocumentIdentity.from_path("C:\\schemas\\a.json")
        assert identity.resolve("sub/b.json").path == "C:\\schemas\\sub\\b.json"


def test_finding_defaults_to_error_severity() -> None:
    span = SourceSpan(offset=0, length=2, start=Position(row=0, column=0), end=Position(row=0, column=2))
    finding = ValidationFinding(
        document=DocumentIdentity(path="/work/a.json"),
        reference="#/x",
        source_node=SyntaxNode(index=3, kind=NodeKind.STRING, offset=0, length=2, value="#/x"),
        span=span,
        code=FindingCode.INVALID_POINTER,
        message='Invalid JSON pointer: "#/x"',
    )
    assert finding.severity is Severity.ERROR
    assert finding.model_dump(mode="json")["code"] == "invalid-pointer"
