from .mytyping import (
    ChildCompilationResult,
    HashType,
    PathType,
    RenderedOutput,
)


class EvaluatorInterface:
    def evaluate(self, result: ChildCompilationResult) -> RenderedOutput:
        raise NotImplementedError()  # pragma: no cover

    def __call__(self, result: ChildCompilationResult) -> RenderedOutput:
        return self.evaluate(result)


class HostInterface:
    def run_child_compilation(self, name: str, entry: PathType) -> ChildCompilationResult:
        raise NotImplementedError()  # pragma: no cover

    def emit_asset(self, filename: str, content: RenderedOutput) -> None:
        raise NotImplementedError()  # pragma: no cover


class PluginInterface:
    @property
    def name(self) -> str:
        raise NotImplementedError()  # pragma: no cover

    @property
    def evaluation_count(self) -> int:
        raise NotImplementedError()  # pragma: no cover

    @property
    def child_compiler_hash(self) -> HashType|None:
        raise NotImplementedError()  # pragma: no cover

    def run_cycle(self, host: HostInterface) -> None:
        raise NotImplementedError()  # pragma: no cover
