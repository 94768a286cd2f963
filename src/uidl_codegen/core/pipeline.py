"""
Orchestration logic for executing plugin stages.

This module provides the ``ComponentPipeline``, which runs a fixed, ordered
list of plugins over one ``ComponentStructure``. Stages run strictly one
after another because each may depend on chunks and mappings produced by
earlier ones. Any stage may be a coroutine function; the pipeline awaits it
before starting the next stage.
"""

import inspect
import logging
from typing import List

from uidl_codegen.core.hooks import ComponentPlugin
from uidl_codegen.core.structure import ComponentStructure

logger = logging.getLogger(__name__)


def _stage_name(plugin: ComponentPlugin) -> str:
  return getattr(plugin, "__name__", type(plugin).__name__)


class ComponentPipeline:
  """
  Manages a sequence of plugins and executes them in order.
  """

  def __init__(self, plugins: List[ComponentPlugin]) -> None:
    """
    Initializes the pipeline with a list of plugins.

    Args:
        plugins: Sequenced list of transforms to execute.
    """
    self.plugins = list(plugins)

  async def run(self, structure: ComponentStructure) -> ComponentStructure:
    """
    Executes all plugins sequentially on the structure.

    Errors raised by a plugin propagate unchanged and abort the component.

    Args:
        structure: The component's shared state.

    Returns:
        The structure returned by the last stage.
    """
    current = structure
    for plugin in self.plugins:
      name = _stage_name(plugin)
      logger.debug(f"[{current.uidl.name}] running stage '{name}'")
      result = plugin(current)
      if inspect.isawaitable(result):
        result = await result
      if result is not None:
        current = result
      logger.debug(f"[{current.uidl.name}] stage '{name}' produced {len(current.chunks)} chunks")
    return current
