from ..core.mytyping import PathType
from ..utils.references import normalize_path
from .compiler import BuildHost
from .stats import BuildStats


class RecompilationSimulator:
    """
    Drives repeated builds of a BuildHost while faking file edits.

    Edits are kept in the host's file system overlay and are always derived
    from the file content captured by `add_test_file`, so the files on disk
    are never touched.
    """
    def __init__(self, host: BuildHost):
        self.host = host
        self._originals: dict[PathType, str] = {}

    def add_test_file(self, path: PathType) -> None:
        path = normalize_path(path)
        self._originals[path] = self.host.file_system.read_text(path)

    def simulate_file_change(
        self,
        path: PathType,
        header: str = "",
        footer: str = "",
        content: str|None = None,
    ) -> None:
        original = self._original(path)
        if content is None:
            content = original
        self.host.file_system.write_overlay(path, header + content + footer)

    def simulate_file_removal(self, path: PathType) -> None:
        self._original(path)
        self.host.file_system.remove(path)

    def restore_file(self, path: PathType) -> None:
        self._original(path)
        self.host.file_system.restore(path)

    def run(self) -> BuildStats:
        return self.host.run()

    def _original(self, path: PathType) -> str:
        path = normalize_path(path)
        if path not in self._originals:
            raise ValueError(f"{path} was not registered with add_test_file")
        return self._originals[path]
