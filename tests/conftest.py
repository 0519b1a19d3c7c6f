"""Shared fixtures and helpers for tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from ref_navigator.core.documents import TextDocument
from ref_navigator.core.errors import DocumentLoadError
from ref_navigator.loaders.filesystem import FileSystemLoader
from ref_navigator.models import DocumentIdentity

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Loader doubles
# ---------------------------------------------------------------------------


class DictLoader:
    """Serve documents from a path -> text mapping and record every load."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files = dict(files or {})
        self.loaded: list[DocumentIdentity] = []

    async def load(self, identity: DocumentIdentity) -> str:
        self.loaded.append(identity)
        try:
            return self.files[identity.path]
        except KeyError:
            raise DocumentLoadError(identity.path, "not found") from None


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fs_loader() -> FileSystemLoader:
    return FileSystemLoader()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON value (or raw text) below ``tmp_path`` and return its path."""

    def _write(name: str, content: Any) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_document() -> Callable[..., TextDocument]:
    def _make(text: str, path: str = "/work/a.json") -> TextDocument:
        return TextDocument(DocumentIdentity.from_path(path), text)

    return _make


@pytest.fixture
def make_loader() -> Callable[..., DictLoader]:
    return DictLoader
