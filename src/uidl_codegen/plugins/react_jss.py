"""
Plugin styling the component with react-jss.

Walks the UIDL content and, for every node declaring a `style` map:
- derives a class name from the node name ('mainTitle' -> 'main-title'),
- collects `{class_name: style}` into one style table,
- sets `className={classes['main-title']}` on the node's tag.

It then emits:
1. `jss-import`: `import injectSheet from 'react-jss'`.
2. `jss-style-definition`: `const style = {...}`, after the import.
3. the export chunk: `export default injectSheet(style)(Component)`, after both.

The wrapped component receives the generated class names as `props.classes`.
When styles were collected, a `jss-classes` chunk holding
`const { classes } = props` embeds into the component chunk's statements slot.

If an export chunk already exists its content is replaced by the wrapped
export and the two new names are appended to its `after` list; constraints
added by earlier stages are kept.
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel, Field

from uidl_codegen.core.chunks import Chunk, EmbedDefinition, LinkerSpec, merge_chunk
from uidl_codegen.core.hooks import ComponentPlugin, PluginSettings, register_plugin, validate_plugin_settings
from uidl_codegen.core.jsx import builders
from uidl_codegen.core.jsx.nodes import Identifier, JSXElement
from uidl_codegen.core.structure import ComponentStructure
from uidl_codegen.enums import ChunkType, DependencyKind
from uidl_codegen.plugins.utils import camel_case_to_dash_case
from uidl_codegen.uidl.schema import DependencyRef, UIDLNode

logger = logging.getLogger(__name__)


class JSSConfig(BaseModel):
  """Settings of the react-jss plugin."""

  target_jsx_chunk: str = Field("react-component-jsx", description="Chunk holding the JSX tree.")
  jss_import_chunk_name: str = Field("jss-import")
  component_chunk_name: str = Field("react-pure-component", description="Chunk holding the component function.")
  component_statements_slot: str = Field(
    "component-statements", description="Slot of the component chunk receiving the classes binding."
  )
  classes_chunk_name: str = Field("jss-classes")
  style_chunk_name: str = Field("jss-style-definition")
  export_chunk_name: str = Field("react-component-export")
  jss_declaration_name: str = Field("style", description="Variable holding the style table.")
  jss_version: str = Field("^8.6.1", description="react-jss version recorded as package dependency.")


def generate_style_table(content: UIDLNode, uidl_mappings: Dict[str, JSXElement]) -> Dict[str, Any]:
  """
  Collects class-based styles and tags the matching elements.

  Args:
      content: Root UIDL node of the component.
      uidl_mappings: Identity map of the JSX chunk.

  Returns:
      Dict[str, Any]: class name -> style map. When two node names yield the
      same class name ('mainTitle', 'main_title') a warning is logged and the
      later node's style wins.
  """
  table: Dict[str, Any] = {}
  owners: Dict[str, str] = {}
  for node in content.depth_first():
    if not node.style or node.name is None:
      continue
    tag = uidl_mappings.get(node.name)
    if tag is None:
      continue
    class_name = camel_case_to_dash_case(node.name)
    previous = owners.get(class_name)
    if previous is not None and previous != node.name:
      logger.warning(
        f"Nodes '{previous}' and '{node.name}' share the class name '{class_name}'; the style of '{node.name}' wins."
      )
    owners[class_name] = node.name
    table[class_name] = dict(node.style)
    builders.add_dynamic_attribute(tag, "className", f"classes['{class_name}']")
  return table


@register_plugin("react-jss")
def create_plugin(config: PluginSettings = None) -> ComponentPlugin:
  """
  Factory for the react-jss plugin.

  Args:
      config: `JSSConfig` or a settings dict.
  """
  settings = validate_plugin_settings(JSSConfig, config)

  async def react_jss_plugin(structure: ComponentStructure) -> ComponentStructure:
    jsx_chunk = structure.get_chunk(settings.target_jsx_chunk)
    if jsx_chunk is None:
      logger.warning(f"JSS styles skipped for '{structure.uidl.name}': no chunk named '{settings.target_jsx_chunk}'.")
      return structure

    style_table = generate_style_table(structure.uidl.content, jsx_chunk.meta.get("uidl_mappings", {}))

    structure.chunks.append(
      Chunk(
        type=ChunkType.JS.value,
        name=settings.jss_import_chunk_name,
        content=builders.make_default_import("injectSheet", "react-jss"),
        meta={"usage": "import"},
        linker=LinkerSpec(before=[settings.component_chunk_name]),
      )
    )
    structure.chunks.append(
      Chunk(
        type=ChunkType.JS.value,
        name=settings.style_chunk_name,
        content=builders.make_const_assign(
          settings.jss_declaration_name, builders.object_to_expression(style_table)
        ),
        linker=LinkerSpec(after=[settings.jss_import_chunk_name]),
      )
    )
    merge_chunk(
      structure.chunks,
      Chunk(
        type=ChunkType.JS.value,
        name=settings.export_chunk_name,
        content=builders.make_jss_default_export(structure.uidl.name, settings.jss_declaration_name),
        linker=LinkerSpec(after=[settings.jss_import_chunk_name, settings.style_chunk_name]),
      ),
      replace_content=True,
    )

    if style_table:
      structure.chunks.append(
        Chunk(
          type=ChunkType.JS.value,
          name=settings.classes_chunk_name,
          content=builders.make_const_assign("{ classes }", Identifier("props")),
          linker=LinkerSpec(
            embed=EmbedDefinition(chunk_name=settings.component_chunk_name, slot=settings.component_statements_slot)
          ),
        )
      )

    structure.dependencies["injectSheet"] = DependencyRef(
      kind=DependencyKind.PACKAGE, path="react-jss", version=settings.jss_version
    )
    return structure

  return react_jss_plugin
