"""
Generator Targets Package.

Importing this package registers the bundled targets. Target modules are
discovered by scanning the directory, so a new target only needs a new file
using `@register_target`.
"""

import importlib
import logging
import pkgutil
from pathlib import Path

from uidl_codegen.frameworks.base import (
  GeneratorTarget,
  available_targets,
  get_target,
  register_target,
)

# Infrastructure modules, not targets
_EXCLUDED_MODULES = {"base", "loader", "__init__"}


def _auto_register_targets() -> None:
  """Imports every target module so its `@register_target` decorators run."""
  pkg_path = str(Path(__file__).parent)

  for _, module_name, _ in pkgutil.iter_modules([pkg_path]):
    if module_name in _EXCLUDED_MODULES:
      continue
    try:
      importlib.import_module(f".{module_name}", package=__name__)
    except Exception as e:
      logging.warning(f"⚠️  Failed to load target module '{module_name}': {e}. This target will not be available.")


_auto_register_targets()

__all__ = [
  "GeneratorTarget",
  "available_targets",
  "get_target",
  "register_target",
]
