from copy import deepcopy

from pydantic import BaseModel

from rendercache.utils.hashing import myhash

import pytest


class MyModel(BaseModel):
    x: int
    s: str


class MyObject:
    pass


def test_hashing_basics():
    assert isinstance(myhash("dummy"), str)
    assert len(myhash("dummy")) == 64

    with pytest.raises(NotImplementedError):
        myhash(object())

    with pytest.raises(NotImplementedError):
        myhash(MyObject())

    with pytest.raises(NotImplementedError):
        myhash(("fine", MyObject()))

    mm1 = MyModel(x=1, s="dummy")
    mm2 = MyModel(x=1, s="dummy")
    assert myhash(mm1) == myhash(mm2)
    assert myhash(mm1) != myhash(MyModel(x=2, s="dummy"))


@pytest.mark.parametrize(
    "value",
    [
        "dummy",
        b"dummy",
        1,
        1.0,
        None,
        {"a": 1, "b": 2},
        ["a", 1],
        (1, "dummy"),
    ],
)
def test_hashing_various_types(value):
    deep_copied_value =  deepcopy(value)
    assert myhash(deep_copied_value) == myhash(value)


def test_dict_hashing_is_order_dependent():
    # unlike many hashing schemes, the order of dict keys matters for hashing
    dict1 = {"a": 1, "b": 2}
    dict2 = {"b": 2, "a": 1}
    assert myhash(dict1) != myhash(dict2)


@pytest.mark.parametrize(
    "value1, value2",
    [
        (1, "1"),
        (1, 1.0),
        (1, True),
        (None, "None"),
        ("dummy", b"dummy"),
        (["x"], ("x",)),
        ({"a": 1}, (("a", 1),)),
        (("x",), "tuple:" + myhash("x")),
    ],
)
def test_values_of_different_types_do_not_collide(value1, value2):
    assert myhash(value1) != myhash(value2)


def test_model_hashes_like_its_fields():
    mm = MyModel(x=1, s="dummy")
    assert myhash(mm) == myhash(dict(x=1, s="dummy"))
    assert myhash(mm) != myhash(dict(s="dummy", x=1))


def test_tuple_is_not_its_single_element():
    assert myhash(("dummy",)) != myhash("dummy")
    assert myhash(("a", "b")) != myhash(("b", "a"))
