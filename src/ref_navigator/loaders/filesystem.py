import asyncio
import logging
from pathlib import Path

from ref_navigator.core.errors import DocumentLoadError
from ref_navigator.models import DocumentIdentity

logger = logging.getLogger(__name__)


class FileSystemLoader:
    """Load documents from disk.

    Implements the ``DocumentLoader`` protocol. Reads happen in a worker
    thread so the event loop is never blocked on I/O.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    async def load(self, identity: DocumentIdentity) -> str:
        path = Path(identity.path)
        try:
            return await asyncio.to_thread(path.read_text, encoding=self._encoding)
        except (OSError, ValueError) as exc:
            logger.debug("Failed to load %s: %s", path, exc)
            raise DocumentLoadError(identity.path, str(exc)) from exc
