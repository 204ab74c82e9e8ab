from .base import HashType
from .slot import SingleSlotCache


class NullCache(SingleSlotCache):
    """Never reports a hit, but still keeps the latest record for inspection."""
    def __contains__(self, key: HashType) -> bool:
        return False
