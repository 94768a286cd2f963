"""
Plugin producing the React component shell.

Emits three chunks:
- `react-import`: `import React from 'react'`.
- `react-pure-component`: an arrow function component. Its `component-jsx`
  slot receives the JSX chunk as the returned markup, its
  `component-statements` slot collects statements placed before the return.
- `react-component-export`: `export default <Name>`.

The export chunk may already exist when a styling stage ran first. In that
case its content is kept (it may already wrap the component) and only the
ordering constraint is merged in.
"""

from typing import List

from pydantic import BaseModel, Field

from uidl_codegen.core.chunks import Chunk, LinkerSpec, merge_chunk
from uidl_codegen.core.hooks import ComponentPlugin, PluginSettings, register_plugin, validate_plugin_settings
from uidl_codegen.core.jsx import builders
from uidl_codegen.core.jsx.nodes import ArrowComponent
from uidl_codegen.core.structure import ComponentStructure
from uidl_codegen.enums import ChunkType


class ReactComponentConfig(BaseModel):
  """Settings of the React component plugin."""

  import_chunk_name: str = Field("react-import")
  component_chunk_name: str = Field("react-pure-component")
  jsx_slot: str = Field("component-jsx", description="Slot receiving the component markup.")
  statements_slot: str = Field("component-statements", description="Slot receiving statements run before the return.")
  export_chunk_name: str = Field("react-component-export")


def _jsx_slot(component: ArrowComponent):
  """A component returns a single root: the slot accepts exactly one chunk."""

  def resolve(chunks: List[Chunk]) -> bool:
    if len(chunks) != 1:
      return False
    component.body = chunks[0].content
    return True

  return resolve


def _statements_slot(component: ArrowComponent):
  def resolve(chunks: List[Chunk]) -> bool:
    component.statements.extend(chunk.content for chunk in chunks)
    return True

  return resolve


@register_plugin("react-component")
def create_plugin(config: PluginSettings = None) -> ComponentPlugin:
  """
  Factory for the React component plugin.

  Args:
      config: `ReactComponentConfig` or a settings dict.
  """
  settings = validate_plugin_settings(ReactComponentConfig, config)

  async def react_component_plugin(structure: ComponentStructure) -> ComponentStructure:
    name = structure.uidl.name
    component = ArrowComponent(name=name)

    merge_chunk(
      structure.chunks,
      Chunk(
        type=ChunkType.JS.value,
        name=settings.import_chunk_name,
        content=builders.make_default_import("React", "react"),
        meta={"usage": "import"},
      ),
    )
    merge_chunk(
      structure.chunks,
      Chunk(
        type=ChunkType.JS.value,
        name=settings.component_chunk_name,
        content=component,
        linker=LinkerSpec(
          after=[settings.import_chunk_name],
          slots={settings.jsx_slot: _jsx_slot(component), settings.statements_slot: _statements_slot(component)},
        ),
      ),
    )
    merge_chunk(
      structure.chunks,
      Chunk(
        type=ChunkType.JS.value,
        name=settings.export_chunk_name,
        content=builders.make_default_export(name),
        linker=LinkerSpec(after=[settings.component_chunk_name]),
      ),
      replace_content=False,
    )
    return structure

  return react_component_plugin
