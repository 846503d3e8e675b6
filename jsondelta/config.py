import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool
from traitlets.config import Config, Configurable
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_FILENAME = 'jsondelta_config.json'


class JsonDelta(Configurable):
    """Settings of the jsondelta command.

    Read from the "JsonDelta" section of jsondelta_config.json files.
    """

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)

    indent = Integer(
        2,
        help="Indentation of the JSON output. A negative value "
             "writes the diff on a single line.",
    ).tag(config=True)

    sort_keys = Bool(
        True,
        help="Whether to sort the keys of JSON objects in the output.",
    ).tag(config=True)


def config_search_path():
    "Config directories in descending priority, starting with the cwd."
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def load_config(path=None):
    """Merge the config files found in path into a single Config.

    Files earlier in path take precedence over later ones.
    """
    if path is None:
        path = config_search_path()
    config = Config()
    for directory in reversed(path):
        loader = JSONFileConfigLoader(CONFIG_FILENAME, path=directory)
        try:
            config.merge(loader.load_config())
        except ConfigFileNotFound:
            pass
    return config


def build_config(config=None):
    """Return the effective settings as a dict of trait name to value.

    Values from config files are validated by the traits, so
    a bad value raises a TraitError.
    """
    if config is None:
        config = load_config()
    settings = JsonDelta(config=config)
    return {name: getattr(settings, name)
            for name in settings.trait_names(config=True)}
