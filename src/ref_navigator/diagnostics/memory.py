from collections.abc import Iterator, Sequence

from ref_navigator.models import DocumentIdentity, ValidationFinding


class InMemoryDiagnosticCollection:
    """Findings per document; every ``set`` replaces what was stored before."""

    def __init__(self, name: str = "json-schema-references") -> None:
        self.name = name
        self._findings: dict[DocumentIdentity, list[ValidationFinding]] = {}

    def set(self, identity: DocumentIdentity, findings: Sequence[ValidationFinding]) -> None:
        self._findings[identity] = list(findings)

    def get(self, identity: DocumentIdentity) -> list[ValidationFinding]:
        return list(self._findings.get(identity, []))

    def delete(self, identity: DocumentIdentity) -> None:
        self._findings.pop(identity, None)

    def clear(self) -> None:
        self._findings.clear()

    def has(self, identity: DocumentIdentity) -> bool:
        return identity in self._findings

    def __iter__(self) -> Iterator[tuple[DocumentIdentity, list[ValidationFinding]]]:
        for identity, findings in list(self._findings.items()):
            yield identity, list(findings)

    def __len__(self) -> int:
        return len(self._findings)
