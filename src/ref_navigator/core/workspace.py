from __future__ import annotations

import logging

from ref_navigator.core.documents import TextDocument
from ref_navigator.core.ports.diagnostics import DiagnosticCollection
from ref_navigator.core.ports.loader import DocumentLoader
from ref_navigator.core.scanner import scan_document
from ref_navigator.models import DocumentIdentity, ValidationFinding

logger = logging.getLogger(__name__)


class ReferenceWorkspace:
    """Track open documents and keep their reference diagnostics current.

    Open documents shadow the fallback loader, so unsaved text is what
    references resolve against. Implements the ``DocumentLoader`` protocol.
    """

    def __init__(self, fallback: DocumentLoader, diagnostics: DiagnosticCollection) -> None:
        self._fallback = fallback
        self.diagnostics = diagnostics
        self._documents: dict[DocumentIdentity, TextDocument] = {}

    @property
    def documents(self) -> list[TextDocument]:
        return list(self._documents.values())

    async def load(self, identity: DocumentIdentity) -> str:
        document = self._documents.get(identity)
        if document is not None:
            return document.text
        return await self._fallback.load(identity)

    async def open(self, document: TextDocument) -> list[ValidationFinding]:
        self._documents[document.identity] = document
        return await self.validate(document)

    async def change(self, document: TextDocument) -> list[ValidationFinding]:
        self._documents[document.identity] = document
        return await self.validate(document)

    def close(self, identity: DocumentIdentity) -> None:
        self._documents.pop(identity, None)
        self.diagnostics.delete(identity)

    async def validate(self, document: TextDocument) -> list[ValidationFinding]:
        findings = await scan_document(document, self)
        self.diagnostics.set(document.identity, findings)
        if findings:
            logger.info("%s: %d broken reference(s)", document.identity, len(findings))
        return findings

    async def validate_all(self) -> list[ValidationFinding]:
        """Re-check every open document, e.g. after a file it references changed."""
        findings: list[ValidationFinding] = []
        for document in self.documents:
            findings.extend(await self.validate(document))
        return findings
