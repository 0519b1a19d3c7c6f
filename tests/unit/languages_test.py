"""Unit tests for document type detection, settings and logging setup."""

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from ref_navigator.core.languages import collect_documents, is_supported_file
from ref_navigator.logging_config import setup_logging
from ref_navigator.settings import Settings, load_settings


class TestLanguages:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", True), ("b.jsonc", True), ("readme.txt", False), ("Makefile", False)],
    )
    def test_is_supported_file(self, name: str, expected: bool) -> None:
        assert is_supported_file(Path(name)) is expected

    def test_collect_documents(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "b.json").write_text("{}")
        (tmp_path / "a.jsonc").write_text("{}")
        (tmp_path / "notes.txt").write_text("")
        explicit = tmp_path / "notes.txt"

        collected = collect_documents([tmp_path, explicit])

        assert collected == [tmp_path / "a.jsonc", tmp_path / "sub" / "b.json", explicit]


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("REF_NAVIGATOR_LOG_LEVEL", "REF_NAVIGATOR_ENCODING", "REF_NAVIGATOR_HOVER_MAX_LENGTH"):
            monkeypatch.delenv(name, raising=False)
        assert load_settings() == Settings()

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REF_NAVIGATOR_LOG_LEVEL", "debug")
        monkeypatch.setenv("REF_NAVIGATOR_ENCODING", "utf-16")
        monkeypatch.setenv("REF_NAVIGATOR_HOVER_MAX_LENGTH", "80")
        assert load_settings() == Settings(log_level="DEBUG", encoding="utf-16", hover_max_length=80)


def test_setup_logging_installs_rich_handler() -> None:
    setup_logging("INFO")
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert any(isinstance(h, RichHandler) for h in root.handlers)

    setup_logging("WARNING", verbose=True)
    assert logging.getLogger().level == logging.DEBUG
