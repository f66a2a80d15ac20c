#!/usr/bin/env python3
from collections import namedtuple
from marshmallow import Schema, fields, validate, post_load, EXCLUDE


_UploadRequest = namedtuple(
    'UploadRequest',
    ('content', 'title', 'language', 'duration', 'max_views', 'api_key')
)


class UploadRequest(_UploadRequest):
    """\
    Everything needed for one paste upload

    Args:
        content: raw bytes to paste, may be empty
        title: paste title
        language: syntax highlighting hint
        duration: minutes the paste lives for
        max_views: views before the paste expires, 0 for unlimited
        api_key: pastery api key
    """

    __slots__ = ()

    def __new__(cls, content: bytes=b"", title: str="", language: str="",
                duration: int=60, max_views: int=0, api_key: str=""):
        return super().__new__(
            cls, content, title, language, duration, max_views, api_key)

    def __repr__(self):
        # never leak the api key into logs or tracebacks
        return (
            "<UploadRequest: {} bytes, title={!r}, language={!r}, "
            "duration={}, max_views={}>"
        ).format(len(self.content), self.title, self.language,
                 self.duration, self.max_views)


class UploadResponse(object):

    _schema = None  # should be set later

    def __init__(self, url: str):
        self.url = url

    @classmethod
    def load(cls, data):
        return cls._schema.load(data)

    def __eq__(self, other):
        return isinstance(other, self.__class__) and self.url == other.url

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return "<UploadResponse: {}>".format(self.url)


class UploadResponseSchema(Schema):
    """\
    Json Schema for pastery's reply, only url is kept
    """

    class Meta:
        unknown = EXCLUDE

    url = fields.String(required=True, validate=validate.Length(min=1))

    @post_load
    def make_response(self, data, **kwargs):
        return UploadResponse(**data)


UploadResponse._schema = UploadResponseSchema()


# vim: ts=4 sw=4 sts=4 expandtab
