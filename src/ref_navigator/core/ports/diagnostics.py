from collections.abc import Sequence
from typing import Protocol

from ref_navigator.models import DocumentIdentity, ValidationFinding


class DiagnosticCollection(Protocol):
    def set(self, identity: DocumentIdentity, findings: Sequence[ValidationFinding]) -> None: ...

    def get(self, identity: DocumentIdentity) -> list[ValidationFinding]: ...

    def delete(self, identity: DocumentIdentity) -> None: ...

    def clear(self) -> None: ...
