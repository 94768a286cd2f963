"""
Base Class and Registry for Generator Targets.

A target bundles everything needed to generate code for one UI framework
flavour: the element mapping tables (base first, overlays after) and the
ordered plugin chain, referenced by registered plugin name.
"""

from typing import Any, Dict, List, Mapping, Optional, Type

from uidl_codegen.core.errors import CodegenError, UnknownTargetError
from uidl_codegen.core.hooks import ComponentPlugin, PluginSettings, get_plugin_factory
from uidl_codegen.core.resolver import ElementResolver, MappedElement
from uidl_codegen.frameworks.loader import load_mapping


class GeneratorTarget:
  """
  Describes one generator target.

  Attributes:
      display_name (str): Human readable label.
      ui_priority (int): Sort key for listings (lower first).
      mappings (List[str]): Bundled mapping tables, applied in order.
      plugins (List[str]): Plugin chain, executed in order.
      file_extension (str): Extension of generated component files.
  """

  display_name: str = "Generic"
  ui_priority: int = 999
  mappings: List[str] = ["html"]
  plugins: List[str] = []
  file_extension: str = ".js"

  def create_resolver(
    self,
    custom_mapping: Optional[Mapping[str, Any]] = None,
    fallback: Optional[MappedElement] = None,
  ) -> ElementResolver:
    """
    Builds the resolver from the target's tables plus an optional overlay.

    Args:
        custom_mapping: Caller overlay, applied last (wins on conflict).
        fallback: Element used for unmapped types.

    Returns:
        ElementResolver: A resolver shareable across components.
    """
    tables = [load_mapping(name) for name in self.mappings]
    base = tables[0] if tables else {}
    overlays = tables[1:]
    if custom_mapping:
      overlays.append(custom_mapping)
    return ElementResolver(base, overlays=overlays, fallback=fallback)

  def create_plugins(self, settings: PluginSettings = None) -> List[ComponentPlugin]:
    """
    Instantiates the plugin chain.

    Args:
        settings: Settings handed to every factory; each keeps the keys it knows.

    Returns:
        List[ComponentPlugin]: Configured transforms, in execution order.

    Raises:
        CodegenError: If a plugin of the chain is not registered.
    """
    chain = []
    for name in self.plugins:
      factory = get_plugin_factory(name)
      if factory is None:
        raise CodegenError(f"Plugin '{name}' required by target '{self.display_name}' is not registered.")
      chain.append(factory(settings))
    return chain


_TARGET_REGISTRY: Dict[str, Type[GeneratorTarget]] = {}


def register_target(name: str):
  def wrapper(cls):
    _TARGET_REGISTRY[name] = cls
    return cls

  return wrapper


def get_target(name: str) -> GeneratorTarget:
  """
  Instantiates a registered target.

  Raises:
      UnknownTargetError: If `name` is not registered.
  """
  cls = _TARGET_REGISTRY.get(name)
  if cls is None:
    raise UnknownTargetError(name, available_targets())
  return cls()


def available_targets() -> List[str]:
  """Registered target keys, sorted by UI priority then name."""
  return sorted(_TARGET_REGISTRY, key=lambda key: (_TARGET_REGISTRY[key].ui_priority, key))
