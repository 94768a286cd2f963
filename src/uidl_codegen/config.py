"""
Runtime Configuration Store.

Settings are resolved from, in increasing priority:
1. Defaults (this file).
2. The `[tool.uidl_codegen]` table of the nearest `pyproject.toml`.
3. Explicit arguments (CLI flags).
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from uidl_codegen.frameworks import available_targets

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "react.InlineStyles"


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the generators.
  """

  target: str = Field(DEFAULT_TARGET, description="Generator target key (e.g. 'react.JSS').")
  custom_mapping: Optional[Path] = Field(None, description="JSON element mapping overlaid on the target tables.")
  fallback_element: Optional[str] = Field(
    None, description="Tag used for unmapped UIDL types. If None, unmapped types abort generation."
  )
  local_dependencies_prefix: str = Field("./", description="Import prefix for local components.")
  plugin_settings: Dict[str, Any] = Field(default_factory=dict, description="Settings passed to plugin factories.")
  plugin_paths: List[Path] = Field(default_factory=list, description="External directories to scan for plugins.")

  @field_validator("target")
  @classmethod
  def validate_target(cls, v: str) -> str:
    """
    Ensures the target is registered.

    Args:
        v (str): The target key to validate.

    Returns:
        str: The stripped target key.

    Raises:
        ValueError: If the target is not found in the registry.
    """
    v_clean = v.strip()
    known = available_targets()
    if known and v_clean not in known:
      raise ValueError(f"Unknown target: '{v_clean}'. Supported targets: {known}")
    return v_clean

  @property
  def effective_plugin_settings(self) -> Dict[str, Any]:
    """Plugin settings with the top-level options folded in; explicit plugin settings win."""
    return {"local_dependencies_prefix": self.local_dependencies_prefix, **self.plugin_settings}

  @classmethod
  def load(
    cls,
    target: Optional[str] = None,
    custom_mapping: Optional[Path] = None,
    fallback_element: Optional[str] = None,
    local_dependencies_prefix: Optional[str] = None,
    plugin_settings: Optional[Dict[str, Any]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Args:
        target (Optional[str]): Override for the generator target.
        custom_mapping (Optional[Path]): Override for the custom mapping file.
        fallback_element (Optional[str]): Override for the fallback tag.
        local_dependencies_prefix (Optional[str]): Override for the local import prefix.
        plugin_settings (Optional[Dict]): Plugin settings merged over the file's.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    def _resolve(raw: str) -> Path:
      return (toml_dir / Path(raw)).resolve() if toml_dir else Path(raw).resolve()

    final_mapping = custom_mapping
    if final_mapping is None and "custom_mapping" in toml_config:
      final_mapping = _resolve(toml_config["custom_mapping"])

    final_plugins = {**toml_config.get("plugin_settings", {}), **(plugin_settings or {})}

    return cls(
      target=target or toml_config.get("target", DEFAULT_TARGET),
      custom_mapping=final_mapping,
      fallback_element=fallback_element or toml_config.get("fallback_element"),
      local_dependencies_prefix=local_dependencies_prefix or toml_config.get("local_dependencies_prefix", "./"),
      plugin_settings=final_plugins,
      plugin_paths=[_resolve(p) for p in toml_config.get("plugin_paths", [])],
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning(f"Ignoring unreadable {toml_path}: {e}")
        return {}, None
      return data.get("tool", {}).get("uidl_codegen", {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Types are inferred (bool, int, float, or string).

  Args:
      items (Optional[List[str]]): Raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.
  """
  if not items:
    return {}

  config: Dict[str, Any] = {}
  for item in items:
    if "=" not in item:
      logger.warning(f"Ignoring invalid config format: '{item}'. Expected 'key=value'.")
      continue

    key, val_str = item.split("=", 1)
    key = key.strip()
    val_str = val_str.strip()

    final_val: Any = val_str

    if val_str.lower() == "true":
      final_val = True
    elif val_str.lower() == "false":
      final_val = False
    else:
      try:
        if "." in val_str or "e" in val_str.lower():
          final_val = float(val_str)
        else:
          final_val = int(val_str)
      except ValueError:
        pass

    config[key] = final_val

  return config
