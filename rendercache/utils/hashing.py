import hashlib
from typing import Any, Iterable

from pydantic import BaseModel


def myhash(obj: Any) -> str:
    # every branch hashes under its own type tag, so 1, "1", [1] and (1,) all differ
    if isinstance(obj, BaseModel):
        return myhash(dict(obj))
    elif isinstance(obj, tuple):
        return _tagged("tuple", _joined(obj))
    elif isinstance(obj, list):
        return _tagged("list", _joined(obj))
    elif isinstance(obj, dict):
        return _tagged("dict", _joined(obj.items()))
    elif obj is None or isinstance(obj, (bool, int, float)):
        return _tagged(type(obj).__name__, repr(obj).encode("utf-8"))
    elif isinstance(obj, str):
        return _tagged("str", obj.encode("utf-8"))
    elif isinstance(obj, bytes):
        return _tagged("bytes", obj)
    else:
        raise NotImplementedError(type(obj))


def _joined(elems: Iterable[Any]) -> bytes:
    return ",".join(myhash(elem) for elem in elems).encode("utf-8")


def _tagged(tag: str, data: bytes) -> str:
    return hashlib.sha256(tag.encode("utf-8") + b":" + data).hexdigest()
