from pathlib import Path

_EXTENSION_LANGUAGE_MAP = {
    ".json": "json",
    ".jsonc": "jsonc",
}

SUPPORTED_EXTENSIONS = frozenset(_EXTENSION_LANGUAGE_MAP)


def is_supported_file(file_path: Path) -> bool:
    return file_path.suffix.lower() in SUPPORTED_EXTENSIONS


def collect_documents(paths: list[Path]) -> list[Path]:
    """Expand directories into the supported files below them, keeping order."""
    collected: list[Path] = []
    for path in paths:
        if path.is_dir():
            collected.extend(p for p in sorted(path.rglob("*")) if p.is_file() and is_supported_file(p))
        else:
            collected.append(path)
    return collected
