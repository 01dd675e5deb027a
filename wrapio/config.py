import configparser
import logging
import os
from contextlib import contextmanager
from copy import copy
from typing import Any, Iterable, Optional, Union

from wrapio.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

config_path = os.environ.get("WRAPIO_CONFIG")
if not config_path:
    config_path = os.path.expanduser("~/.wrapio/wrapio.cfg")

CONFIG_SECTION = "global"

# Options holding a unit count; everything else is read as a plain string.
SIZE_KEYS = ("reader_pushback_size", "transfer_buffer_size")

_default_config = {
    "reader_pushback_size": 1,
    "transfer_buffer_size": 8 * 1024,
    "print_encoding": "utf-8",
}

config = copy(_default_config)


def _validate(key: str, value: Any) -> Any:
    if key not in config:
        raise KeyError(f"Non existing config '{key}'")
    if key in SIZE_KEYS:
        value = int(value)
        if value <= 0:
            raise InvalidArgumentError(f"Config '{key}' must be positive")
    return value


def load_config(paths: Optional[Union[str, Iterable[str]]] = None) -> list:
    """Read the ``[global]`` section of the given config file(s).

    Missing files are ignored. Returns the list of files that were read.
    """
    if paths is None:
        paths = [config_path]
    elif isinstance(paths, str):
        paths = [paths]

    parser = configparser.ConfigParser()
    read_files = parser.read(list(paths))
    if parser.has_section(CONFIG_SECTION):
        for option in parser.options(CONFIG_SECTION):
            if option not in config:
                logger.debug("Ignoring unknown config option '%s'", option)
                continue
            try:
                set_config(option, parser.get(CONFIG_SECTION, option))
            except ValueError as error:
                logger.warning("Keeping config '%s' at %r: %s", option, config[option], error)
    return read_files


def reset_config():
    for key, value in _default_config.items():
        set_config(key, value)


def set_config(key: str, value: Any):
    config[key] = _validate(key, value)


def get_config(key: Optional[str] = None):
    if key is None:
        return config
    elif key in config:
        return config[key]
    else:
        raise KeyError(f"Non existing config '{key}'")


@contextmanager
def config_context(*args):
    """Set some config items for within a certain context."""
    if len(args) % 2 != 0 or len(args) < 2:
        raise ValueError(
            "Need to invoke as config_context(key, value, [(key, value), ...])."
        )

    configs = list(zip(args[::2], args[1::2]))

    undo = {key: get_config(key) for key, _ in configs}
    try:
        for key, value in configs:
            set_config(key, value)

        yield

    finally:
        for key, value in undo.items():
            set_config(key, value)


load_config()
