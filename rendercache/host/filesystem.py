from pathlib import Path

from ..core.mytyping import PathType
from ..utils.references import normalize_path


class FileSystem:
    """Reads files from disk, with an in-memory overlay for simulated edits."""
    def __init__(self):
        self._overlay: dict[PathType, str|None] = {}

    def read_text(self, path: PathType|Path) -> str:
        path = normalize_path(path)
        if path in self._overlay:
            content = self._overlay[path]
            if content is None:
                raise FileNotFoundError(path)
            return content
        return Path(path).read_text()

    def write_overlay(self, path: PathType|Path, content: str) -> None:
        self._overlay[normalize_path(path)] = content

    def remove(self, path: PathType|Path) -> None:
        self._overlay[normalize_path(path)] = None

    def restore(self, path: PathType|Path) -> None:
        self._overlay.pop(normalize_path(path), None)
