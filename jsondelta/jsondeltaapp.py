# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_filename_args,
    dump_kwargs_from_args, ConfigBackedParser,
    )
from .diffing import diff
from .log import UnsupportedOperation, error, info
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json


_description = "Compute the difference between two JSON documents."


def main_diff(args):
    """Main handler of diff CLI"""
    output = getattr(args, 'out', None)
    base, remote = args.base, args.remote

    # Check that the files either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (base, remote):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1
    # Both files cannot be missing
    if base == EXPLICIT_MISSING_FILE and remote == EXPLICIT_MISSING_FILE:
        print("Cannot diff {!r} against {!r}".format(base, remote))
        return 1

    a = read_json(base)
    b = read_json(remote)

    try:
        d = diff(a, b)
    except UnsupportedOperation as e:
        error("Cannot diff %s against %s: %s", base, remote, e)
        return 1

    kwargs = dump_kwargs_from_args(args)
    if output:
        write_json(d, output, **kwargs)
        info("Diff written to %s", output)
    else:
        # print rather than sys.stdout.write, so capsys picks it up
        print(json.dumps(d, **kwargs))

    return 0


def _build_arg_parser(prog='jsondelta'):
    """Creates an argument parser for the jsondelta command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_filename_args(parser, ["base", "remote"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the diff is written to this file. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
