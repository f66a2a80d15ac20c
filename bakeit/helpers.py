#!/usr/bin/env python3
import os
import sys
import logging

from urllib.parse import urlsplit, urlunsplit, parse_qsl, urlencode
from .exceptions import InputReadError

__ctx = {
    'debug': bool(os.environ.get("BAKEIT_DEBUG")),
}

STDIN_NAME = "-"


def set_debug(debug: bool):
    __ctx['debug'] = debug


def get_logger(name, level=None) -> logging.Logger:
    logging.basicConfig(format='[%(name)s] [%(levelname)s] %(message)s')
    logger = logging.getLogger(name)
    if level is None:
        level = logging.DEBUG if __ctx['debug'] else logging.INFO
    logger.setLevel(level)
    return logger


def read_content(filename=None, stdin=None) -> bytes:
    """\
    Read the whole paste content

    Args:
        filename: file to read, None or "-" for standard input
        stdin: text stream to drain instead of sys.stdin

    Returns:
        content as bytes, possibly empty
    """
    logger = get_logger(__name__)

    if filename is None or filename == STDIN_NAME:
        stream = stdin if stdin is not None else sys.stdin
        # binary buffer when there is one, so pasted bytes are kept as is
        stream = getattr(stream, 'buffer', stream)
        try:
            content = stream.read()
        except (OSError, ValueError) as e:
            raise InputReadError(
                "Error reading from stdin: {}".format(e)) from e
        if isinstance(content, str):
            content = content.encode('utf-8')
        logger.debug("read {} bytes from stdin".format(len(content)))
        return content

    try:
        with open(filename, 'rb') as f:
            content = f.read()
    except OSError as e:
        raise InputReadError(
            "Error reading file {}: {}".format(filename, e.strerror or e)
        ) from e

    logger.debug("read {} bytes from {}".format(len(content), filename))
    return content


def redact_url(url, secret_keys=("api_key", )):
    parts = urlsplit(url)
    query = [
        (k, "***" if k in secret_keys else v)
        for k, v in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))


# vim: ts=4 sw=4 sts=4 expandtab
