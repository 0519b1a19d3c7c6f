from typing import Protocol


class FileWatcherPort(Protocol):
    """Keeps open JSON documents in sync with the files below a directory."""

    async def start(self) -> None: ...

    async def stop(self) -> None: ...

    async def wait(self) -> None: ...
