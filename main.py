#!/usr/bin/env python3
"""Main bootstrap script: loads the user management extension from CONFIG_DIR."""

import sys

from user_extension.infrastructure.bootstrap.cli import main

if __name__ == "__main__":
    sys.exit(main())
