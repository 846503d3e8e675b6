# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from .values import Missing

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_json(f, on_null="missing"):
    """Read and return a JSON value from filename

    Parameters:
        f:  The filename to read from or null filename
            ("/dev/null" on *nix, "nul" on Windows).
            Alternatively a file-like object can be passed.
        on_null: What to return when filename null
            "missing": return Missing, i.e. an absent side of a diff
            "empty": return empty dict
    """
    if f == EXPLICIT_MISSING_FILE:
        if on_null == 'missing':
            return Missing
        elif on_null == 'empty':
            return {}
        else:
            raise ValueError(
                'Not valid value for `on_null`: %r. Valid values '
                'are "missing" or "empty"' % (on_null,))
    elif isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            return json.load(fo)
    else:
        return json.load(f)


def write_json(value, f, **kwargs):
    """Write a JSON value to a filename or file-like object"""
    if isinstance(f, str):
        with io.open(f, 'w', encoding='utf-8') as fo:
            json.dump(value, fo, **kwargs)
            fo.write('\n')
    else:
        json.dump(value, f, **kwargs)
        f.write('\n')

