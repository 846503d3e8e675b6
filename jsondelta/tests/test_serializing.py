# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import enum
from collections import namedtuple
from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from jsondelta import to_value_tree, diff, diff_objects, Missing


class Color(enum.Enum):
    RED = 1
    GREEN = 2


class Level(enum.IntEnum):
    LOW = 1
    HIGH = 2


@dataclass
class Subtree:
    added: Optional[str]
    changed: Optional[int]
    removed: Optional[bool]


@dataclass
class Data:
    string: str
    bool: bool
    number: int
    subtree: Subtree


@dataclass
class Tagged:
    name: str
    tags: List[str] = field(default_factory=list)


Point = namedtuple("Point", ["x", "y"])


class Plain(object):
    def __init__(self, name, value):
        self.name = name
        self.value = value
        self._private = "hidden"


def test_scalars_are_kept():
    for v in [None, True, False, 0, 1.5, "text"]:
        assert to_value_tree(v) is v


def test_enums_become_names():
    assert to_value_tree(Color.RED) == "RED"
    assert to_value_tree(Level.HIGH) == "HIGH"
    assert to_value_tree({"c": Color.GREEN}) == {"c": "GREEN"}


def test_mapping_keys_like_json_dumps():
    tree = to_value_tree({"s": 1, 2: 2, 1.5: 3, True: 4, None: 5})
    assert tree == {"s": 1, "2": 2, "1.5": 3, "true": 4, "null": 5}
    tree = to_value_tree({float("nan"): 1, float("inf"): 2, float("-inf"): 3, Level.LOW: 4})
    assert tree == {"NaN": 1, "Infinity": 2, "-Infinity": 3, "1": 4}
    with pytest.raises(TypeError):
        to_value_tree({(1, 2): "tuple key"})


def test_colliding_mapping_keys():
    with pytest.raises(TypeError):
        to_value_tree({1: "a", "1": "b"})
    with pytest.raises(TypeError):
        to_value_tree({"outer": {None: 1, "null": 2}})
    with pytest.raises(TypeError):
        to_value_tree({True: 1, "true": 2})


def test_sequences_become_lists():
    assert to_value_tree((1, "a", None)) == [1, "a", None]
    tree = to_value_tree([{"a": (1,)}])
    assert tree == [{"a": [1]}]
    assert isinstance(tree[0]["a"], list)


def test_input_is_copied():
    obj = {"a": {"b": [1]}}
    tree = to_value_tree(obj)
    assert tree == obj
    assert tree is not obj
    assert tree["a"] is not obj["a"]
    assert tree["a"]["b"] is not obj["a"]["b"]


def test_namedtuple_becomes_object():
    assert to_value_tree(Point(1, 2)) == {"x": 1, "y": 2}


def test_dataclass_becomes_object_with_nulls():
    tree = to_value_tree(Subtree(None, 11, True))
    assert tree == {"added": None, "changed": 11, "removed": True}
    assert "added" in tree
    assert to_value_tree(Tagged("t")) == {"name": "t", "tags": []}


def test_plain_object_public_attributes():
    assert to_value_tree(Plain("n", Point(0, 1))) == {
        "name": "n", "value": {"x": 0, "y": 1}}


def test_unconvertible_objects():
    for v in [object(), {1, 2}, b"bytes", Plain]:
        with pytest.raises(TypeError):
            to_value_tree(v)


def test_diff_objects_serialized():
    data1 = Data("one", False, 42, Subtree(None, 11, True))
    data2 = Data("two", True, 43, Subtree("value", 22, None))

    result = diff_objects(data1, data2)

    assert result == {
        "string": "two",
        "number": 43,
        "bool": True,
        "subtree": {
            "changed": 22,
            "removed": None,
            "added": "value",
        },
    }


def test_diff_objects_same_as_diff_of_trees():
    data1 = Tagged("a", ["x"])
    data2 = Tagged("b", ["x"])
    assert diff_objects(data1, data2) == diff(to_value_tree(data1), to_value_tree(data2))
    assert diff_objects(data1, data2) == {"name": "b"}
    assert diff_objects(data1, data1) == {}


def test_diff_objects_missing():
    data = Tagged("a")
    assert diff_objects(data, Missing) == {"name": "a", "tags": []}
    assert diff_objects(Missing, data) == {"name": "a", "tags": []}
    assert diff_objects(None, data) == {"name": "a", "tags": []}
