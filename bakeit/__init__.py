#!/usr/bin/env python3
__version__ = "0.1.0"

# vim: ts=4 sw=4 sts=4 expandtab
