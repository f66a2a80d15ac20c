#!/usr/bin/env python3
import os
import configparser

from .exceptions import ConfigError

CONFIG_ENV = "BAKEIT_CONFIG"
CONFIG_SECTION = "pastery"
CONFIG_KEY = "api_key"


def config_path():
    """\
    Where to look for the api key, $BAKEIT_CONFIG or ~/.config/bakeit.cfg
    """
    path = os.environ.get(CONFIG_ENV)
    if path:
        return path

    home = os.path.expanduser("~")
    if home == "~":
        raise ConfigError("Cannot determine the home directory")
    return os.path.join(home, ".config", "bakeit.cfg")


def read_api_key(path) -> str:
    """\
    Read api_key from the [pastery] section of an ini file
    """
    parser = configparser.ConfigParser(interpolation=None)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            parser.read_file(f)
    except UnicodeDecodeError as e:
        raise ConfigError(
            "Config file {} is not valid UTF-8: {}".format(path, e)) from e
    except OSError as e:
        raise ConfigError(
            "Cannot read config file {}: {}".format(path, e.strerror or e)
        ) from e
    except configparser.Error as e:
        raise ConfigError(
            "Malformed config file {}: {}".format(path, e)) from e

    api_key = parser.get(CONFIG_SECTION, CONFIG_KEY, fallback="").strip()
    if not api_key:
        raise ConfigError("missing {} in [{}] section of {}".format(
            CONFIG_KEY, CONFIG_SECTION, path))
    return api_key


# vim: ts=4 sw=4 sts=4 expandtab
