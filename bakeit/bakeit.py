#!/usr/bin/env python3
import sys
import argparse

from . import __version__
from .config import config_path, read_api_key
from .exceptions import BakeitError
from .helpers import get_logger, set_debug, read_content
from .models import UploadRequest
from .textstore import Pastery, DEFAULT_TIMEOUT


def positive_float(value):
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            "invalid number: {!r}".format(value))
    if not number > 0:
        raise argparse.ArgumentTypeError(
            "must be greater than 0: {!r}".format(value))
    return number


def get_parser():
    parser = argparse.ArgumentParser(
        "bakeit",
        description="BakeIt is a command line utility to Pastery "
                    "(https://www.pastery.net), the best pastebin in the "
                    "world. BakeIt aims to be simple to use and unobtrusive.",
    )
    parser.add_argument('filename', nargs='?', default=None,
                        help="file to paste (stdin if omitted or '-')")
    parser.add_argument('--title', default="", help="The title of the paste")
    parser.add_argument('--lang', default="",
                        help="The language highlighter to use")
    parser.add_argument('--duration', type=int, default=60,
                        help="The duration the paste should live for")
    parser.add_argument('--max-views', type=int, default=0,
                        help="How many times the paste can be viewed "
                             "before it expires")
    parser.add_argument('--open-browser', action='store_true',
                        help="Automatically open a browser window when "
                             "done (accepted, currently has no effect)")
    parser.add_argument('--config', default=None,
                        help="config file holding [pastery] api_key")
    parser.add_argument('--timeout', type=positive_float,
                        default=DEFAULT_TIMEOUT,
                        help="seconds to wait for Pastery")
    parser.add_argument('--debug', action='store_true',
                        help="print debug messages")
    parser.add_argument('--version', action='version',
                        version="%(prog)s " + __version__)
    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)
    set_debug(args.debug)
    logger = get_logger("BakeIt")

    try:
        cfg_path = args.config or config_path()
        api_key = read_api_key(cfg_path)
        logger.info("Found api_key in {}".format(cfg_path))

        request = UploadRequest(
            content=read_content(args.filename),
            title=args.title,
            language=args.lang,
            duration=args.duration,
            max_views=args.max_views,
            api_key=api_key,
        )
        logger.debug("uploading {!r}".format(request))
        response = Pastery(timeout=args.timeout).new_paste(request)
    except BakeitError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    print("Paste URL:", response.url)
    return 0


if __name__ == "__main__":
    sys.exit(main())

# vim: ts=4 sw=4 sts=4 expandtab
