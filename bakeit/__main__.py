#!/usr/bin/env python3
import sys
from .bakeit import main

if __name__ == "__main__":
    sys.exit(main())

# vim: ts=4 sw=4 sts=4 expandtab
