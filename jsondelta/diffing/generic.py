# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..log import UnsupportedOperation, debug
from ..values import Missing, ValueKind, value_kind, values_equal, object_keys

__all__ = ["diff", "diff_entries"]


def diff(a=Missing, b=Missing):
    """The recursive difference between a and b.

    For example, when
    `a = {"key0": "val", "key1": "abc", "key2": "xyz"}` and
    `b = {"key0": "val", "key1": "bcd", "key3": "123"}` the result is
    `{"key1": "bcd", "key2": None, "key3": "123"}`.

    An empty dict means there is no difference, whatever the kind of
    the compared values. If one side is Missing the other side is
    returned as is, and on a type mismatch b is returned as is.

    Raises UnsupportedOperation if a and b are both arrays.
    """
    if a is Missing:
        return b
    if b is Missing:
        return a

    akind = value_kind(a)
    bkind = value_kind(b)
    if akind != bkind:
        return b

    if akind == ValueKind.OBJECT:
        return diff_entries(a, b)
    elif akind == ValueKind.ARRAY:
        debug("Refusing to diff arrays of length %d and %d", len(a), len(b))
        raise UnsupportedOperation("JSON arrays not supported")
    elif akind in ValueKind.SCALARS:
        if values_equal(a, b):
            return {}
        return b
    raise AssertionError("Unhandled value kind %r" % akind)


def diff_entries(a, b):
    """Compute the entry-wise diff of two dicts.

    Added keys get their value from b, taken whole.
    Removed keys map to None. Keys in both with unequal values
    map to the recursive diff of the values, equal ones are left out.

    Note that a removal and a change to None look the same in the result.
    """
    result = {}

    akeys = object_keys(a)
    bkeys = object_keys(b)

    # Sorting keys to get a deterministic diff result
    for key in sorted(akeys | bkeys):
        if key not in akeys:
            # Added
            result[key] = b[key]
        elif key not in bkeys:
            # Removed
            result[key] = None
        else:
            avalue = a[key]
            bvalue = b[key]
            if not values_equal(avalue, bvalue):
                result[key] = diff(avalue, bvalue)

    return result
