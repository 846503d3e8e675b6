# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import JsonDelta, build_config
from .log import init_logging, set_jsondelta_log_level


def apply_log_level(name):
    "Set up logging and set the jsondelta log level by name."
    level = getattr(logging, name)
    init_logging(level=level)
    set_jsondelta_log_level(level)


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser with defaults from jsondelta_config.json files.

    Once parsed, the effective log level (from the command
    line or the config files) is applied to the jsondelta logger.
    """

    def parse_known_args(self, args=None, namespace=None):
        self.set_defaults(**build_config())
        namespace, extras = super(ConfigBackedParser, self).parse_known_args(
            args=args, namespace=namespace)
        log_level = getattr(namespace, 'log_level', None)
        if log_level is not None:
            apply_log_level(log_level)
        return namespace, extras


def print_config(config, out):
    """Write the effective config values to out, JSON encoded"""
    out.write('{}:\n'.format(JsonDelta.__name__))
    for k in sorted(config):
        out.write('  {}: {}\n'.format(k, json.dumps(config[k])))


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print_config(build_config(), out=sys.stderr)
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all jsondelta commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=JsonDelta.log_level.values,
        help="set the log level by name.",
    )


def add_diff_args(parser):
    """Adds a set of arguments controlling how a diff is written.
    """
    parser.add_argument(
        '--indent',
        default=2,
        type=int,
        help="indentation of the JSON output. A negative value "
             "writes the diff on a single line.")
    sort = parser.add_mutually_exclusive_group()
    sort.add_argument(
        '--sort-keys',
        dest='sort_keys',
        action='store_true',
        default=True,
        help="sort the keys of JSON objects in the output (default).")
    sort.add_argument(
        '--no-sort-keys',
        dest='sort_keys',
        action='store_false',
        help="keep the keys of JSON objects in diff order.")


def add_filename_args(parser, names):
    helps = {
        "base": "the base JSON filename.",
        "remote": "the remote modified JSON filename.",
    }
    for name in names:
        parser.add_argument(name, help=helps[name])


def dump_kwargs_from_args(arguments):
    "Keyword arguments for json.dump from parsed diff args."
    indent = arguments.indent
    if indent is not None and indent < 0:
        return dict(indent=None, separators=(",", ":"), sort_keys=arguments.sort_keys)
    return dict(indent=indent, separators=(",", ": "), sort_keys=arguments.sort_keys)
