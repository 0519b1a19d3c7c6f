"""JSON Pointer (RFC 6901) encoding and decoding."""

import re
from collections.abc import Sequence
PointerSegment = str | int
PointerPath = list[PointerSegment]

_INDEX_SEGMENT = re.compile(r"[0-9]+")


def _unescape(segment: str) -> str:
    # ~1 first so that "~01" decodes to "~1" rather than "/".
    return segment.replace("~1", "/").replace("~0", "~")


def _escape(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")


def decode_pointer(pointer: str) -> PointerPath:
    """Split a JSON Pointer into segments.

    All-digit segments become ints. An empty pointer (or a lone ``/``)
    addresses the document root and decodes to ``[]``.
    """
    if not pointer or not pointer.strip():
        return []

    normalized = pointer[1:] if pointer.startswith("/") else pointer
    if not normalized:
        return []

    segments: PointerPath = []
    for raw in normalized.split("/"):
        segment = _unescape(raw)
        segments.append(int(segment) if _INDEX_SEGMENT.fullmatch(segment) else segment)
    return segments


def encode_pointer(path: Sequence[PointerSegment]) -> str:
    if not path:
        return ""
    return "/" + "/".join(_escape(str(segment)) for segment in path)
