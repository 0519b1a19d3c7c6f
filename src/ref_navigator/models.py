import ntpath
import os
import posixpath
import re
from enum import Enum
from pathlib import PurePosixPath, PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field

_WINDOWS_DRIVE = re.compile(r"^[a-zA-Z]:[\\/]")


def is_windows_drive_path(path: str) -> bool:
    return _WINDOWS_DRIVE.match(path) is not None


class DocumentIdentity(BaseModel):
    """Canonical location of a text resource.

    Windows drive paths (``C:\\schemas\\a.json``) are kept in Windows form even
    on POSIX hosts so references between them resolve the same way everywhere.
    """

    model_config = ConfigDict(frozen=True)

    path: str

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "DocumentIdentity":
        raw = os.fspath(path)
        if is_windows_drive_path(raw):
            return cls(path=ntpath.normpath(raw))
        return cls(path=os.path.abspath(raw))

    @property
    def is_windows(self) -> bool:
        return is_windows_drive_path(self.path)

    @property
    def name(self) -> str:
        return ntpath.basename(self.path) if self.is_windows else posixpath.basename(self.path)

    @property
    def directory(self) -> str:
        return ntpath.dirname(self.path) if self.is_windows else os.path.dirname(self.path)

    @property
    def uri(self) -> str:
        if self.is_windows:
            return PureWindowsPath(self.path).as_uri()
        return PurePosixPath(self.path).as_uri()

    def resolve(self, relative: str) -> "DocumentIdentity":
        """Resolve ``relative`` against this document's directory."""
        if self.is_windows:
            return DocumentIdentity(path=ntpath.normpath(ntpath.join(self.directory, relative)))
        return DocumentIdentity(path=os.path.normpath(os.path.join(self.directory, relative)))

    def __str__(self) -> str:
        return self.path


class Position(BaseModel):
    row: int
    column: int


class SourceSpan(BaseModel):
    offset: int
    length: int
    start: Position
    end: Position


class NodeKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    PROPERTY = "property"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class SyntaxNode(BaseModel):
    """A node of a parsed JSON document, stored in a ``SyntaxTree`` arena.

    ``children`` and ``parent`` are arena indices. Only scalar kinds carry a
    ``value``; a property always has exactly two children, key then value.
    """

    index: int
    kind: NodeKind
    offset: int
    length: int
    value: str | int | float | bool | None = None
    children: list[int] = Field(default_factory=list)
    parent: int | None = None

    @property
    def end(self) -> int:
        return self.offset + self.length


class SchemaMetadata(BaseModel):
    title: str | None = None
    description: str | None = None
    type: str | None = None

    def is_empty(self) -> bool:
        return self.title is None and self.description is None and self.type is None


class Severity(str, Enum):
    ERROR = "error"


class FindingCode(str, Enum):
    UNRESOLVABLE_REFERENCE = "unresolvable-reference"
    FILE_NOT_FOUND = "file-not-found"
    INVALID_POINTER = "invalid-pointer"


class ValidationFinding(BaseModel):
    document: DocumentIdentity
    reference: str
    source_node: SyntaxNode
    span: SourceSpan
    code: FindingCode
    message: str
    severity: Severity = Severity.ERROR


class ResolvedTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference: str
    source_span: SourceSpan | None = None
    target_document: DocumentIdentity
    target_node: SyntaxNode
    target_span: SourceSpan
    metadata: SchemaMetadata
    pointer_display: str
    pointer_fragment: str | None = None
