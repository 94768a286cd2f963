"""
Entry point for module execution (``python -m uidl_codegen``).

This module delegates execution to the CLI handler in ``uidl_codegen.cli.__main__``.
"""

import sys
from uidl_codegen.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
