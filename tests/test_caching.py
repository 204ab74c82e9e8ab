from rendercache.caching.null import NullCache
from rendercache.caching.slot import SingleSlotCache
from rendercache.core.mytyping import CacheRecord

import pytest


def test_single_slot_cache():
    cache = SingleSlotCache()
    assert cache.record == CacheRecord()
    assert cache.record.is_empty
    assert cache.last_hash is None
    assert "hash1" not in cache
    assert None not in cache

    with pytest.raises(KeyError):
        cache["hash1"]

    output1 = ["rendered", "one"]
    cache["hash1"] = output1
    assert "hash1" in cache
    assert cache.last_hash == "hash1"
    assert cache["hash1"] is output1

    output2 = ["rendered", "two"]
    cache["hash2"] = output2
    assert "hash1" not in cache
    assert "hash2" in cache
    assert cache["hash2"] is output2
    assert cache.record == CacheRecord(last_hash="hash2", last_rendered_output=output2)

    with pytest.raises(KeyError):
        cache["hash1"]


def test_single_slot_cache_replaces_record_as_a_whole():
    cache = SingleSlotCache()
    cache["hash1"] = "one"
    first_record = cache.record

    cache["hash2"] = "two"
    assert cache.record is not first_record
    assert first_record.last_hash == "hash1"
    assert first_record.last_rendered_output == "one"

    with pytest.raises(ValueError):
        cache[None] = "three"
    assert cache.record == CacheRecord(last_hash="hash2", last_rendered_output="two")


def test_null_cache():
    null_cache = NullCache()
    assert "hash1" not in null_cache

    null_cache["hash1"] = "dummy"
    assert "hash1" not in null_cache
    assert null_cache.last_hash == "hash1"
    assert null_cache.record.last_rendered_output == "dummy"

    with pytest.raises(KeyError):
        null_cache["hash1"]
