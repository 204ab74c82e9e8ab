import logging
from typing import Callable

from ..caching.null import NullCache
from ..caching.slot import SingleSlotCache
from ..core.mytyping import (
    CacheConfig,
    CacheRecord,
    ChildCompilationResult,
    HashType,
    PathType,
    RenderedOutput,
)
from ..tracking.deps import DependencyTracker


logger = logging.getLogger(__name__)

EvaluatorType = Callable[[ChildCompilationResult], RenderedOutput]


class InvalidationGate:
    """
    Decides whether a child compilation result needs to be evaluated again.

    The gate owns a single-slot cache. A result whose hash matches the cached
    one is a hit and the cached output is returned as is. Anything else is
    evaluated and, once evaluation returned, stored in place of the previous
    record. With caching disabled every result is evaluated.

    Errors raised by the evaluator propagate unchanged and leave the cached
    record as it was before the call.
    """
    def __init__(
        self,
        evaluator: EvaluatorType,
        cache_config: CacheConfig|None = None,
    ):
        self.cache_config = cache_config if cache_config is not None else CacheConfig()
        self.tracker = DependencyTracker()
        self._evaluator = evaluator
        self._cache: SingleSlotCache = SingleSlotCache() if self.cache_config.caching_enabled else NullCache()
        self._evaluation_count = 0
        self._compilation_hash: HashType|None = None

    @property
    def evaluation_count(self) -> int:
        return self._evaluation_count

    @property
    def compilation_hash(self) -> HashType|None:
        return self._compilation_hash

    @property
    def record(self) -> CacheRecord:
        return self._cache.record

    @property
    def dependencies(self) -> tuple[PathType, ...]:
        return self.tracker.dependencies

    def evaluate_compilation_result(self, result: ChildCompilationResult) -> RenderedOutput:
        self._evaluation_count += 1
        logger.info("Evaluating %s (evaluation #%d)", result.name, self._evaluation_count)
        return self._evaluator(result)

    def process(self, result: ChildCompilationResult) -> RenderedOutput:
        self.tracker.observe(result)
        self._compilation_hash = result.hash

        if result.hash in self._cache:
            logger.debug("Cache hit for %s (%.12s)", result.name, result.hash)
            return self._cache[result.hash]

        if self.record.is_empty:
            logger.debug("Cold start for %s", result.name)
        elif not self.cache_config.caching_enabled:
            logger.debug("Caching disabled, re-evaluating %s", result.name)
        else:
            logger.debug("Cache miss for %s (%.12s -> %.12s)", result.name, self.record.last_hash, result.hash)

        rendered = self.evaluate_compilation_result(result)
        self._cache[result.hash] = rendered
        return rendered
