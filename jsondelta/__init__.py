# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, diff_objects
from .log import JSONDeltaError, UnsupportedOperation
from .serializing import to_value_tree
from .values import Missing


__all__ = [
    "__version__",
    "diff", "diff_objects",
    "to_value_tree",
    "Missing",
    "JSONDeltaError", "UnsupportedOperation",
    ]
