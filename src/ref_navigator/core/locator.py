"""Turn a raw ``$ref`` value into a target document and pointer path."""

import os
import re
from dataclasses import dataclass, field
from urllib.parse import unquote, urlsplit

from ref_navigator.core.errors import MalformedReferenceError, UnsupportedSchemeError
from ref_navigator.core.pointer import PointerPath, decode_pointer
from ref_navigator.models import DocumentIdentity, is_windows_drive_path

_URI_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z+\-.]*://")
_DRIVE_IN_URI_PATH = re.compile(r"^/[a-zA-Z]:[\\/]")


@dataclass(frozen=True)
class LocatedReference:
    raw: str
    file_part: str
    pointer_part: str
    target: DocumentIdentity
    path: PointerPath = field(default_factory=list)

    @property
    def pointer_display(self) -> str:
        return f"#{self.pointer_part}" if self.pointer_part else ""


def split_reference(raw: str) -> tuple[str, str]:
    """Split a reference into its file part and pointer part at the first ``#``."""
    trimmed = raw.strip()
    file_part, hash_sign, pointer_part = trimmed.partition("#")
    return file_part, pointer_part if hash_sign else ""


def _identity_from_file_uri(raw: str, file_part: str) -> DocumentIdentity:
    try:
        parts = urlsplit(file_part)
    except ValueError as exc:
        raise MalformedReferenceError(raw, str(exc)) from exc

    scheme = parts.scheme.lower()
    if scheme != "file":
        raise UnsupportedSchemeError(raw, scheme)

    path = unquote(parts.path)
    if _DRIVE_IN_URI_PATH.match(path):
        path = path[1:]
    elif parts.netloc and parts.netloc.lower() != "localhost":
        path = f"//{parts.netloc}{path}"

    if not path:
        raise MalformedReferenceError(raw, "file URI has no path")
    return DocumentIdentity.from_path(path)


def locate_reference(base: DocumentIdentity, raw: str) -> LocatedReference:
    """Compute the target of ``raw`` relative to the document ``base``.

    The target file is not checked for existence. Raises
    ``UnsupportedSchemeError`` for non-``file`` URIs and
    ``MalformedReferenceError`` when a URI cannot be parsed.
    """
    file_part, pointer_part = split_reference(raw)

    if not file_part:
        target = base
    elif _URI_SCHEME.match(file_part):
        target = _identity_from_file_uri(raw, file_part)
    elif os.path.isabs(file_part) or is_windows_drive_path(file_part):
        target = DocumentIdentity.from_path(file_part)
    else:
        target = base.resolve(file_part)

    return LocatedReference(
        raw=raw,
        file_part=file_part,
        pointer_part=pointer_part,
        target=target,
        path=decode_pointer(pointer_part),
    )
