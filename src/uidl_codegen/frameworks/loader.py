"""
Element Mapping Loader.

Loads the static element mapping tables stored as JSON in
`src/uidl_codegen/frameworks/definitions/`, and caller-provided custom
mapping files. Bundled tables are cached: they are read-only configuration
shared by every component.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

from uidl_codegen.core.resolver import MappingTable, build_mapping_table

logger = logging.getLogger(__name__)

# .../src/uidl_codegen/frameworks/definitions
DEFINITIONS_DIR = Path(__file__).parent / "definitions"


@lru_cache(maxsize=None)
def load_mapping(name: str) -> MappingTable:
  """
  Loads a bundled mapping table.

  Args:
      name (str): Table key (e.g. 'html', 'react').

  Returns:
      MappingTable: UIDL type -> MappedElement. Empty if the file does not exist
      or cannot be parsed.
  """
  file_path = get_definitions_path(name)
  if not file_path.exists():
    return {}

  try:
    with open(file_path, "r", encoding="utf-8") as f:
      raw_data = json.load(f)
    return build_mapping_table(raw_data)
  except (json.JSONDecodeError, OSError) as e:
    logger.warning(f"Failed to load element mapping '{name}': {e}")
    return {}


def load_custom_mapping(path: Path) -> MappingTable:
  """
  Loads a caller-provided overlay table. Errors propagate: a broken custom
  mapping is a configuration problem the caller must see.

  Args:
      path (Path): JSON file of `{uidl_type: {name, attrs, dependency}}` entries.

  Returns:
      MappingTable: The validated overlay.
  """
  with open(path, "r", encoding="utf-8") as f:
    raw_data = json.load(f)
  return build_mapping_table(raw_data)


def clear_mapping_cache() -> None:
  """Clears the cache of bundled tables."""
  load_mapping.cache_clear()


def get_definitions_path(name: str) -> Path:
  """Returns the path of a bundled mapping table."""
  return DEFINITIONS_DIR / f"{name}.json"
