"""
Shared helpers for plugins.
"""

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def camel_case_to_dash_case(name: str) -> str:
  """
  Converts 'mainContainer' to 'main-container'.

  Spaces and underscores also become dashes so any UIDL node name yields a
  usable class name.
  """
  dashed = _CAMEL_BOUNDARY.sub(r"\1-\2", name)
  return re.sub(r"[\s_]+", "-", dashed).lower()
