"""
Plugin Registry and Loader.

A plugin is a transform applied to a `ComponentStructure`. Plugins are built
by factories: a factory is configured once (with a settings dict or its
pydantic settings model) and returns a reusable transform which is then run
once per component.

Factories register themselves under a name with `@register_plugin`, so
targets can declare their plugin chain by name and external plugin modules
can be dropped into a directory listed in the configuration.
"""

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from uidl_codegen.core.structure import ComponentStructure

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

ComponentPlugin = Callable[[ComponentStructure], Union[ComponentStructure, Awaitable[ComponentStructure]]]
PluginSettings = Optional[Union[Mapping[str, Any], BaseModel]]
PluginFactory = Callable[[PluginSettings], ComponentPlugin]

_PLUGINS: Dict[str, PluginFactory] = {}
_PLUGINS_LOADED = False


def register_plugin(name: str) -> Callable[[PluginFactory], PluginFactory]:
  """
  Decorator registering a plugin factory.

  Args:
      name: Unique plugin name (e.g. 'react-jsx'), referenced by target plugin chains.
  """

  def decorator(factory: PluginFactory) -> PluginFactory:
    _PLUGINS[name] = factory
    return factory

  return decorator


def get_plugin_factory(name: str) -> Optional[PluginFactory]:
  """
  Retrieves a registered factory by name.
  Lazily imports the built-in plugins on first use.
  """
  if not _PLUGINS_LOADED:
    load_plugins()
  return _PLUGINS.get(name)


def available_plugins() -> List[str]:
  """Names of all registered plugin factories."""
  if not _PLUGINS_LOADED:
    load_plugins()
  return sorted(_PLUGINS.keys())


def validate_plugin_settings(model: Type[T], settings: PluginSettings) -> T:
  """
  Validates plugin settings against the plugin's pydantic model.

  Keys unknown to the model are ignored, so one shared settings dict can
  configure a whole plugin chain.

  Args:
      model: The plugin's settings model.
      settings: None, a dict of settings, or an instance of `model`.

  Returns:
      T: The validated settings.
  """
  if isinstance(settings, model):
    return settings
  if isinstance(settings, BaseModel):
    settings = settings.model_dump()
  relevant_keys = model.model_fields.keys()
  subset = {k: v for k, v in (settings or {}).items() if k in relevant_keys}
  return model.model_validate(subset)


def load_plugins(extra_dirs: Optional[List[Path]] = None) -> int:
  """
  Imports the built-in plugins and, optionally, plugin modules from directories.

  Args:
      extra_dirs: Directories whose `.py` files are imported (e.g. user extensions).

  Returns:
      int: Number of registered plugins after loading.
  """
  global _PLUGINS_LOADED

  if not _PLUGINS_LOADED:
    import uidl_codegen.plugins  # noqa: F401

    _PLUGINS_LOADED = True

  for directory in extra_dirs or []:
    if directory.exists() and directory.is_dir():
      _import_from_dir(directory)

  return len(_PLUGINS)


def _import_from_dir(directory: Path) -> int:
  """Imports every python file of `directory` as a standalone module."""
  count = 0
  for item in sorted(directory.glob("*.py")):
    if item.name == "__init__.py":
      continue
    unique_name = f"uidl_codegen_plugin_{item.stem}_{item.stat().st_ino}"
    try:
      spec = importlib.util.spec_from_file_location(unique_name, item)
      if spec and spec.loader:
        module = importlib.util.module_from_spec(spec)
        sys.modules[unique_name] = module
        spec.loader.exec_module(module)
        count += 1
    except Exception as e:
      logger.warning(f"Failed to load plugin {item.name}: {e}")
  return count
