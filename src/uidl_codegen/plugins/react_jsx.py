"""
Plugin producing the JSX tree of a React component.

Builds the target tree from the component's UIDL content and emits:

1. One import chunk per import source used by the generated elements.
   Dependencies sharing a path are grouped into a single statement, except
   that each statement carries at most one default import.
2. The JSX chunk holding the tree. It embeds itself into the pure component
   chunk's slot and exposes a `children` slot. Its `uidl_mappings` meta (the
   identity map) is how later stages find the tag generated for a UIDL node.

Every recorded dependency is stored on the structure, keyed by element name.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from uidl_codegen.core.chunks import Chunk, EmbedDefinition, LinkerSpec, merge_chunk
from uidl_codegen.core.hooks import ComponentPlugin, PluginSettings, register_plugin, validate_plugin_settings
from uidl_codegen.core.jsx.nodes import ImportStatement, JSXElement
from uidl_codegen.core.structure import ComponentStructure
from uidl_codegen.core.tree_builder import build_tree
from uidl_codegen.enums import ChunkType, DependencyKind, ImportStyle
from uidl_codegen.uidl.schema import DependencyRef


class JSXPluginConfig(BaseModel):
  """Settings of the JSX plugin."""

  chunk_name: str = Field("react-component-jsx", description="Name of the JSX chunk.")
  embed_chunk_name: str = Field("react-pure-component", description="Chunk the JSX is embedded into.")
  embed_slot: str = Field("component-jsx", description="Slot of the embedding chunk.")
  local_dependencies_prefix: str = Field("./", description="Path prefix for local components without a path.")


def resolve_import_path(element_name: str, dependency: DependencyRef, local_prefix: str) -> str:
  """Import source of a dependency; local components default to `<prefix><Element>`."""
  if dependency.path:
    return dependency.path
  return f"{local_prefix}{element_name}"


def add_import_specifier(statement: ImportStatement, element_name: str, dependency: DependencyRef) -> None:
  """
  Adds the specifier importing `element_name` to a statement.

  Named-aliased imports read `import { Original as Element }`; without an
  `original_name` they degrade to a plain named import.

  Raises:
      ValueError: If the statement already default-imports another name.
  """
  if dependency.import_style == ImportStyle.DEFAULT:
    if statement.default not in (None, element_name):
      raise ValueError(f"'{statement.source}' already default-imports '{statement.default}', not '{element_name}'.")
    statement.default = element_name
  elif dependency.import_style == ImportStyle.NAMED_ALIASED and dependency.original_name:
    statement.add_named(dependency.original_name, element_name)
  else:
    statement.add_named(element_name)


def _takes_default(statement: Optional[ImportStatement], element_name: str, dependency: DependencyRef) -> bool:
  """A statement holds one default import; a second default name needs its own statement."""
  if statement is None or dependency.import_style != ImportStyle.DEFAULT:
    return True
  return statement.default in (None, element_name)


def generate_import_chunks(structure: ComponentStructure, dependencies: Dict[str, DependencyRef], local_prefix: str) -> None:
  """
  Emits import chunks for the dependencies and records them on the structure.

  Dependencies sharing a path land in the chunk `import-<path>`. A further
  default import from an already used path gets `import-<path>-<Element>`.

  Args:
      structure: Component structure (mutated).
      dependencies: Element name -> dependency, as recorded by the tree builder.
      local_prefix: Prefix for local components without an explicit path.
  """
  statements: Dict[str, ImportStatement] = {}
  for element_name, dependency in dependencies.items():
    path = resolve_import_path(element_name, dependency, local_prefix)
    chunk_name = f"import-{path}"
    if not _takes_default(statements.get(chunk_name), element_name, dependency):
      chunk_name = f"import-{path}-{element_name}"
    if chunk_name not in statements:
      statements[chunk_name] = ImportStatement(source=path)
    add_import_specifier(statements[chunk_name], element_name, dependency)

    if dependency.kind == DependencyKind.LOCAL and not dependency.path:
      dependency = dependency.model_copy(update={"path": path})
    structure.dependencies[element_name] = dependency

  for chunk_name, statement in statements.items():
    merge_chunk(
      structure.chunks,
      Chunk(
        type=ChunkType.JS.value,
        name=chunk_name,
        content=statement,
        meta={"usage": "import"},
      ),
    )


def _children_slot(root: JSXElement):
  """Slot resolver appending embedded chunk contents to the root tag."""

  def resolve(chunks: List[Chunk]) -> bool:
    for chunk in chunks:
      root.add_child(chunk.content)
    return True

  return resolve


@register_plugin("react-jsx")
def create_plugin(config: PluginSettings = None) -> ComponentPlugin:
  """
  Factory for the JSX plugin.

  Args:
      config: `JSXPluginConfig` or a settings dict.
  """
  settings = validate_plugin_settings(JSXPluginConfig, config)

  async def react_jsx_plugin(structure: ComponentStructure) -> ComponentStructure:
    result = build_tree(structure.uidl.content, structure.resolver)

    generate_import_chunks(structure, result.dependencies, settings.local_dependencies_prefix)

    structure.chunks.append(
      Chunk(
        type=ChunkType.JSX.value,
        name=settings.chunk_name,
        content=result.root,
        meta={"usage": settings.chunk_name, "uidl_mappings": result.mappings},
        linker=LinkerSpec(
          embed=EmbedDefinition(chunk_name=settings.embed_chunk_name, slot=settings.embed_slot),
          slots={"children": _children_slot(result.root)},
        ),
      )
    )
    return structure

  return react_jsx_plugin
