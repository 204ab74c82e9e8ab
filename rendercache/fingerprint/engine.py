from typing import Any, Iterable

from pydantic import BaseModel

from ..core.errors import HashComputationFailure
from ..core.mytyping import HashType
from ..utils.hashing import myhash


def module_hash(module: Any) -> HashType:
    """
    Hash one compiled module.

    CompiledModule instances are hashed as models. Any other object exposing
    `path` and `content` is hashed as the equivalent field mapping, so it gets
    the same fingerprint as a CompiledModule with those fields.
    """
    try:
        if isinstance(module, BaseModel):
            return myhash(module)
        return myhash(dict(path=module.path, content=module.content))
    except (AttributeError, NotImplementedError) as error:
        raise HashComputationFailure(f"Cannot fingerprint compiled module {module!r}") from error


def compilation_hash(modules: Iterable[Any], child_hashes: Iterable[HashType] = ()) -> HashType:
    """
    Combine the modules of one pass and the hashes of its nested passes.

    Both collections are sorted before hashing, so neither the order in which
    modules were compiled nor the order in which child passes finished changes
    the result.
    """
    module_hashes = sorted(module_hash(module) for module in modules)
    child_hashes = list(child_hashes)
    for child_hash in child_hashes:
        if not isinstance(child_hash, str):
            raise HashComputationFailure(f"Child compilation hash must be a string, not {type(child_hash).__name__}")
    return myhash(dict(
        modules=module_hashes,
        children=sorted(child_hashes),
    ))
