#!/usr/bin/env python3
"""
VEIN Dedicated Server container entrypoint.

Every argument given to ``docker run`` is passed through to the server.
"""

import sys

from vein_launcher.cli import main

if __name__ == "__main__":
    sys.exit(main(["run", "--", *sys.argv[1:]]))
