"""
Plugins Package.

Automatically discovers and registers all plugin modules within this package,
so adding a new file registers its factory without edits here.
"""

import importlib
import logging
import pkgutil
from pathlib import Path

_pkg_dir = Path(__file__).parent

for _, module_name, _ in pkgutil.iter_modules([str(_pkg_dir)]):
  if module_name.startswith("_") or "utils" in module_name:
    continue

  try:
    importlib.import_module(f".{module_name}", package=__name__)
  except Exception as e:
    # one broken plugin must not disable the others
    logging.warning(f"⚠️  Failed to auto-load plugin '{module_name}': {e}")
