from contextlib import contextmanager
from typing import Iterator

from ..core.mytyping import ChildCompilationResult, PathType


class DependencyTracker:
    """
    Records which artifacts one compilation pass read.

    A compiler brackets its pass with `tracking_pass()` and calls `record()`
    for every file it touches; a consumer of the finished result calls
    `observe()` to pick up whatever dependency list the compiler reported.
    Neither side inspects or corrects the list.
    """
    def __init__(self):
        self._active: list[PathType]|None = None
        self._dependencies: tuple[PathType, ...] = ()

    @property
    def dependencies(self) -> tuple[PathType, ...]:
        return self._dependencies

    @property
    def is_tracking(self) -> bool:
        return self._active is not None

    def begin_pass(self) -> None:
        if self._active is not None:
            raise ValueError("A dependency tracking pass is already active")
        self._active = []

    def record(self, path: PathType) -> None:
        if self._active is None:
            raise ValueError("Cannot record a dependency outside of a tracking pass")
        if path not in self._active:
            self._active.append(path)

    def end_pass(self) -> tuple[PathType, ...]:
        if self._active is None:
            raise ValueError("No dependency tracking pass is active")
        self._dependencies = tuple(self._active)
        self._active = None
        return self._dependencies

    @contextmanager
    def tracking_pass(self) -> Iterator["DependencyTracker"]:
        self.begin_pass()
        try:
            yield self
        finally:
            self.end_pass()

    def observe(self, result: ChildCompilationResult) -> tuple[PathType, ...]:
        self._dependencies = tuple(result.file_dependencies)
        return self._dependencies
