#!/usr/bin/env python3


class BakeitError(Exception):
    pass


class ConfigError(BakeitError):
    """\
    Config file missing, unreadable, or without a usable api_key
    """
    pass


class UploadError(BakeitError):
    pass


class InputReadError(UploadError):
    pass


class TransportError(UploadError):
    pass


class ResponseFormatError(UploadError):
    """\
    Response body is not JSON, or lacks the paste url
    """
    pass


# vim: ts=4 sw=4 sts=4 expandtab
