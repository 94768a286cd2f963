"""
Plugin adding inline styles to the JSX tree.

Walks the UIDL content again and, for every node declaring a `style` map,
sets `style={{...}}` on the tag generated for that node (found through the
JSX chunk's identity map).

The JSX chunk is optional: without it the stage logs a warning and leaves the
structure untouched.
"""

import logging
from typing import Dict

from pydantic import BaseModel, Field

from uidl_codegen.core.hooks import ComponentPlugin, PluginSettings, register_plugin, validate_plugin_settings
from uidl_codegen.core.jsx import builders
from uidl_codegen.core.jsx.nodes import JSXElement
from uidl_codegen.core.structure import ComponentStructure
from uidl_codegen.uidl.schema import UIDLNode

logger = logging.getLogger(__name__)


class InlineStyleConfig(BaseModel):
  """Settings of the inline style plugin."""

  target_jsx_chunk: str = Field("react-component-jsx", description="Chunk holding the JSX tree.")


def enhance_jsx_with_styles(content: UIDLNode, uidl_mappings: Dict[str, JSXElement]) -> None:
  """
  Attaches each node's style as an inline attribute.
  Nodes without a generated tag are skipped.
  """
  for node in content.depth_first():
    if not node.style or node.name is None:
      continue
    tag = uidl_mappings.get(node.name)
    if tag is None:
      continue
    builders.add_tag_styles(tag, node.style)


@register_plugin("react-inline-styles")
def create_plugin(config: PluginSettings = None) -> ComponentPlugin:
  """
  Factory for the inline style plugin.

  Args:
      config: `InlineStyleConfig` or a settings dict.
  """
  settings = validate_plugin_settings(InlineStyleConfig, config)

  async def react_inline_style_plugin(structure: ComponentStructure) -> ComponentStructure:
    jsx_chunk = structure.get_chunk(settings.target_jsx_chunk)
    if jsx_chunk is None:
      logger.warning(
        f"Inline styles skipped for '{structure.uidl.name}': no chunk named '{settings.target_jsx_chunk}'."
      )
      return structure

    enhance_jsx_with_styles(structure.uidl.content, jsx_chunk.meta.get("uidl_mappings", {}))
    return structure

  return react_inline_style_plugin
