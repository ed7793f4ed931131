#!/usr/bin/env python3
"""
Build the kl-hyphenate dictionaries from a checkout.

Usage:
    python scripts/build_dictionaries.py [--source PATH] [--output PATH]

Defaults to the repository root as the source directory, so patterns are
read from ./patterns and dictionaries are written to
./kl_hyphenate/dictionaries. See ``python -m kl_hyphenate.build --help``.
"""

import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from kl_hyphenate.build import main

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_OUTPUT = PROJECT_ROOT / "kl_hyphenate" / "dictionaries"


if __name__ == '__main__':
    args = sys.argv[1:]
    if '--source' not in args and '-s' not in args:
        args += ['--source', str(PROJECT_ROOT)]
    if '--output' not in args and '-o' not in args:
        args += ['--output', str(DEFAULT_OUTPUT)]
    sys.exit(main(args))
