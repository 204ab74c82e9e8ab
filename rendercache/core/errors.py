class RenderCacheError(Exception):
    pass


class DependencyReadFailure(RenderCacheError):
    """A child compilation could not read one of its tracked artifacts."""


class HashComputationFailure(RenderCacheError):
    """Compiled output could not be fingerprinted."""


class EvaluationFailure(RenderCacheError):
    """The render step failed on an otherwise valid compilation result."""
