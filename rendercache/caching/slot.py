from .base import CacheBase, HashType, ValueType
from ..core.mytyping import CacheRecord


class SingleSlotCache(CacheBase):
    """
    Holds at most one (hash, value) pair.

    Writing replaces the whole CacheRecord in one assignment, so readers never
    observe a new hash paired with an old value or vice versa.
    """
    def __init__(self):
        self._record = CacheRecord()

    @property
    def record(self) -> CacheRecord:
        return self._record

    @property
    def last_hash(self) -> HashType|None:
        return self._record.last_hash

    def __contains__(self, key: HashType) -> bool:
        return not self._record.is_empty and key == self._record.last_hash

    def __getitem__(self, key: HashType) -> ValueType:
        if key not in self:
            raise KeyError(key)
        return self._record.last_rendered_output

    def __setitem__(self, key: HashType, value: ValueType) -> None:
        if key is None:
            raise ValueError("Cannot store a rendered output without a compilation hash")
        self._record = CacheRecord(last_hash=key, last_rendered_output=value)
