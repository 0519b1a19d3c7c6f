from typing import Protocol

from ref_navigator.models import DocumentIdentity


class DocumentLoader(Protocol):
    async def load(self, identity: DocumentIdentity) -> str: ...
