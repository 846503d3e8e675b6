# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from jsondelta import diff
from jsondelta.values import values_equal


def assert_compact(a, b, d):
    "Check that no entry of the delta d of dicts a and b is for an unchanged key."
    for key, value in d.items():
        if key in a and key in b:
            assert not values_equal(a[key], b[key]), (
                'delta has entry %r for unchanged value' % key)
            if isinstance(a[key], dict) and isinstance(b[key], dict):
                assert_compact(a[key], b[key], value)


def check_diff(a, b, expected):
    "Check that diff(a, b) gives expected, is compact and leaves a and b untouched."
    a_before = copy.deepcopy(a)
    b_before = copy.deepcopy(b)
    d = diff(a, b)
    assert d == expected
    if isinstance(a, dict) and isinstance(b, dict):
        assert isinstance(d, dict)
        assert_compact(a, b, d)
    assert a == a_before
    assert b == b_before
    return d
