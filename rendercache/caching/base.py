from typing import Any


HashType = str
ValueType = Any


class CacheBase:
    def __contains__(self, key: HashType) -> bool:
        raise NotImplementedError()

    def __getitem__(self, key: HashType) -> ValueType:
        raise NotImplementedError()

    def __setitem__(self, key: HashType, value: ValueType) -> None:
        raise NotImplementedError()
