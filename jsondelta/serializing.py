# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import enum
from collections.abc import Mapping
from dataclasses import fields, is_dataclass


__all__ = ["to_value_tree"]

INFINITY = float("inf")


def _object_key(key):
    "Convert a mapping key to a str, the same way json.dumps does."
    if isinstance(key, str):
        return key
    # bool before int, as True is an int too
    elif key is True:
        return "true"
    elif key is False:
        return "false"
    elif key is None:
        return "null"
    elif isinstance(key, int):
        return int.__repr__(key)
    elif isinstance(key, float):
        # Same spelling as json.encoder uses for the special values
        if key != key:
            return "NaN"
        elif key == INFINITY:
            return "Infinity"
        elif key == -INFINITY:
            return "-Infinity"
        return float.__repr__(key)
    raise TypeError("Keys must be str, int, float, bool or None, not {}".format(
        type(key).__name__))


def _mapping_to_object(obj):
    """Convert a mapping, refusing keys that end up as the same str.

    json.dumps would silently write both entries, e.g. for {1: "a", "1": "b"}.
    """
    tree = {}
    for k, v in obj.items():
        name = _object_key(k)
        if name in tree:
            raise TypeError("Key {!r} converts to {!r}, which is already a key".format(k, name))
        tree[name] = to_value_tree(v)
    return tree


def _is_namedtuple(obj):
    return isinstance(obj, tuple) and hasattr(obj, "_fields") and hasattr(obj, "_asdict")


def to_value_tree(obj):
    """Convert obj into a JSON value tree made of new dicts and lists.

    Dataclasses, namedtuples and plain objects become JSON objects
    keyed by field or attribute name, enum members become their name.
    None is always kept, so an attribute set to None turns into an
    explicit null entry rather than a missing key.

    Raises TypeError for objects that have no JSON representation.
    """
    if obj is None or isinstance(obj, (str, bool, int, float)):
        if isinstance(obj, enum.Enum):
            return obj.name
        return obj
    elif isinstance(obj, enum.Enum):
        return obj.name
    elif isinstance(obj, Mapping):
        return _mapping_to_object(obj)
    elif _is_namedtuple(obj):
        return {k: to_value_tree(v) for k, v in obj._asdict().items()}
    elif isinstance(obj, (list, tuple)):
        return [to_value_tree(v) for v in obj]
    elif is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_value_tree(getattr(obj, f.name)) for f in fields(obj)}
    elif hasattr(obj, "__dict__") and not isinstance(obj, type):
        return {k: to_value_tree(v) for k, v in vars(obj).items()
                if not k.startswith("_")}
    raise TypeError("Object of type {} cannot be converted to a JSON value".format(
        type(obj).__name__))
