# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""The JSON value model as seen by the diff engine.

Values are plain Python objects: None, bool, int/float, str,
mappings with string keys and lists (or tuples). Anything else
is not a value and is rejected when classified.
"""

import math
from collections.abc import Mapping


# Sentinel for a side of a comparison that was never supplied,
# as opposed to None which is the JSON null value
class _MissingType(object):
    __slots__ = ()

    def __repr__(self):
        return "Missing"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "Missing"


Missing = _MissingType()


class ValueKind:
    "Collection of the variants a JSON value can take."
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"

    SCALARS = (NULL, BOOL, NUMBER, STRING)


def value_kind(value):
    """Return the ValueKind of value.

    bool is checked before numbers since it subclasses int in Python,
    while in JSON true and 1 are different variants.

    Raises TypeError for objects outside the JSON value model.
    """
    if value is None:
        return ValueKind.NULL
    elif isinstance(value, bool):
        return ValueKind.BOOL
    elif isinstance(value, (int, float)):
        return ValueKind.NUMBER
    elif isinstance(value, str):
        return ValueKind.STRING
    elif isinstance(value, Mapping):
        return ValueKind.OBJECT
    elif isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    raise TypeError("Not a JSON value: {!r} of type '{}'.".format(
        value, type(value).__name__))


def object_keys(obj):
    "Return the keys of a JSON object as a set, checking they are strings."
    keys = set(obj.keys())
    for key in keys:
        if not isinstance(key, str):
            raise TypeError("JSON object keys must be str, got {!r}.".format(key))
    return keys


def values_equal(a, b):
    """Deep structural equality of two JSON values.

    Unlike ==, values of different kinds are never equal,
    so True != 1 and {"a": False} != {"a": 0}. Numbers compare
    by value (1 == 1.0) and NaN equals NaN.
    """
    if a is b:
        return True

    kind = value_kind(a)
    if kind != value_kind(b):
        return False

    if kind == ValueKind.OBJECT:
        if object_keys(a) != object_keys(b):
            return False
        return all(values_equal(a[key], b[key]) for key in a)
    elif kind == ValueKind.ARRAY:
        if len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    elif kind == ValueKind.NUMBER:
        if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
            return True
        return a == b
    else:
        return a == b
