"""
Component Generator.

Runs the whole per-component flow:

    ComponentStructure -> plugin pipeline -> linker -> rendered text

Each call to `generate` allocates a fresh `ComponentStructure`, so one
generator can serve several components concurrently; only the resolver
(read-only) is shared.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from uidl_codegen.config import RuntimeConfig
from uidl_codegen.core.chunks import Chunk
from uidl_codegen.core.dependencies import collect_packages
from uidl_codegen.core.hooks import ComponentPlugin, load_plugins
from uidl_codegen.core.linker import link
from uidl_codegen.core.pipeline import ComponentPipeline
from uidl_codegen.core.resolver import MappedElement, Resolver
from uidl_codegen.core.structure import ComponentStructure
from uidl_codegen.frameworks import get_target
from uidl_codegen.frameworks.loader import load_custom_mapping
from uidl_codegen.uidl.schema import ComponentUIDL, DependencyRef

logger = logging.getLogger(__name__)


class ComponentResult(BaseModel):
  """
  Output of one component's generation.
  """

  name: str = Field(description="Component name.")
  code: str = Field(default="", description="The generated source code.")
  chunks: List[Any] = Field(default_factory=list, description="Linked top-level chunks, in emission order.")
  dependencies: Dict[str, DependencyRef] = Field(
    default_factory=dict, description="All dependencies, keyed by element name."
  )

  @property
  def packages(self) -> Dict[str, str]:
    """Package manifest fragment (`{package: version}`)."""
    return collect_packages(self.dependencies)


def render_chunks(chunks: List[Chunk]) -> str:
  """
  Prints linked chunks, separated by blank lines.

  Args:
      chunks: Top-level chunks in emission order.

  Returns:
      str: File content ending with a newline.
  """
  parts: List[str] = []
  for chunk in chunks:
    content: Any = chunk.content
    parts.append(content.to_text() if hasattr(content, "to_text") else str(content))
  return "\n\n".join(parts) + "\n"


class ComponentGenerator:
  """
  Generates the code of single components with a fixed plugin chain.
  """

  def __init__(self, resolver: Resolver, plugins: List[ComponentPlugin], file_extension: str = ".js") -> None:
    """
    Args:
        resolver: Shared, read-only element resolver.
        plugins: Plugin chain, in execution order.
        file_extension: Extension of the generated files.
    """
    self.resolver = resolver
    self.pipeline = ComponentPipeline(plugins)
    self.file_extension = file_extension

  async def generate(self, uidl: ComponentUIDL) -> ComponentResult:
    """
    Generates one component.

    Args:
        uidl: The component description.

    Returns:
        ComponentResult: Code, linked chunks and dependencies.

    Raises:
        CodegenError: On unmapped elements or invalid chunk constraints.
    """
    structure = ComponentStructure(uidl=uidl, resolver=self.resolver)
    structure = await self.pipeline.run(structure)
    linked = link(structure.chunks)
    logger.debug(f"[{uidl.name}] linked order: {[c.name for c in linked]}")
    return ComponentResult(
      name=uidl.name,
      code=render_chunks(linked),
      chunks=linked,
      dependencies=dict(structure.dependencies),
    )


def create_component_generator(
  config: Optional[RuntimeConfig] = None,
  plugin_settings: Optional[Dict[str, Any]] = None,
  extra_mapping: Optional[Dict[str, Any]] = None,
) -> ComponentGenerator:
  """
  Builds a generator for the configured target.

  Args:
      config: Runtime configuration. Defaults are used when None.
      plugin_settings: Settings merged over the configuration's plugin settings.
      extra_mapping: Overlay applied before the custom mapping (e.g. the project's own components).

  Returns:
      ComponentGenerator: Ready to generate components.
  """
  config = config or RuntimeConfig()
  if config.plugin_paths:
    load_plugins(extra_dirs=config.plugin_paths)

  target = get_target(config.target)
  custom = dict(extra_mapping or {})
  if config.custom_mapping:
    custom.update(load_custom_mapping(config.custom_mapping))
  fallback = MappedElement(name=config.fallback_element) if config.fallback_element else None
  resolver = target.create_resolver(custom_mapping=custom, fallback=fallback)

  settings = {**config.effective_plugin_settings, **(plugin_settings or {})}
  return ComponentGenerator(resolver, target.create_plugins(settings), file_extension=target.file_extension)
