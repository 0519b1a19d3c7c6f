from __future__ import annotations

from bisect import bisect_right
from functools import cached_property
from pathlib import Path

from ref_navigator.models import DocumentIdentity, Position, SourceSpan


class TextDocument:
    """Text of a document together with its identity.

    Offsets are UTF-8 byte offsets and columns are byte columns, matching the
    extents reported by the syntax parser.
    """

    def __init__(self, identity: DocumentIdentity, text: str) -> None:
        self.identity = identity
        self.text = text

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = "utf-8") -> TextDocument:
        file_path = Path(path)
        return cls(DocumentIdentity.from_path(file_path), file_path.read_text(encoding=encoding))

    @cached_property
    def source(self) -> bytes:
        return self.text.encode("utf-8")

    @cached_property
    def _line_starts(self) -> list[int]:
        starts = [0]
        index = self.source.find(b"\n")
        while index != -1:
            starts.append(index + 1)
            index = self.source.find(b"\n", index + 1)
        return starts

    def position_at(self, offset: int) -> Position:
        offset = max(0, min(offset, len(self.source)))
        row = bisect_right(self._line_starts, offset) - 1
        return Position(row=row, column=offset - self._line_starts[row])

    def offset_at(self, position: Position) -> int:
        if position.row < 0:
            return 0
        if position.row >= len(self._line_starts):
            return len(self.source)
        start = self._line_starts[position.row]
        next_start = (
            self._line_starts[position.row + 1] if position.row + 1 < len(self._line_starts) else len(self.source) + 1
        )
        return start + max(0, min(position.column, next_start - start - 1))

    def span(self, offset: int, length: int) -> SourceSpan:
        return SourceSpan(
            offset=offset,
            length=length,
            start=self.position_at(offset),
            end=self.position_at(offset + length),
        )

    def __repr__(self) -> str:
        return f"TextDocument({self.identity.path!r})"
