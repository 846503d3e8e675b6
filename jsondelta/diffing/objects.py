# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..serializing import to_value_tree
from ..values import Missing
from .generic import diff

__all__ = ["diff_objects"]


def diff_objects(a=Missing, b=Missing):
    """Diff two Python objects by their JSON value trees.

    Attributes set to None are kept as JSON nulls, so
    they are compared like any other value instead of
    being treated as absent.
    """
    if a is not Missing:
        a = to_value_tree(a)
    if b is not Missing:
        b = to_value_tree(b)
    return diff(a, b)
