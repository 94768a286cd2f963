"""
Pydantic Schemas for UIDL Documents.

This module defines the structure of the framework-agnostic UI description
consumed by the generators. Every model is frozen: the pipeline reads the UIDL
but never mutates it.

Keys are accepted in camelCase (as found in JSON documents) or snake_case.
"""

from typing import Any, Dict, Iterator, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from uidl_codegen.enums import DependencyKind, DocumentSchema, ImportStyle


class UIDLModel(BaseModel):
  """Common configuration for all UIDL models."""

  model_config = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
  )


class DependencyRef(UIDLModel):
  """
  Describes where the code for an element comes from.

  Accepts the legacy `type` key as an alias for `kind`.
  """

  kind: DependencyKind = Field(
    DependencyKind.LOCAL,
    validation_alias=AliasChoices("kind", "type"),
    description="'package' dependencies are exported to the manifest, 'local' ones are not.",
  )
  path: Optional[str] = Field(None, description="Import source (package name or relative path).")
  version: Optional[str] = Field(None, description="Version range for package dependencies.")
  import_style: ImportStyle = Field(ImportStyle.DEFAULT, description="Shape of the generated import.")
  original_name: Optional[str] = Field(None, description="Exported name when imported under an alias.")


class UIDLNode(UIDLModel):
  """
  A single node of the UIDL content tree.

  `children` is either a list of nodes, a scalar (static text or a `$props.` binding)
  or absent.
  """

  type: str
  name: Optional[str] = None
  attrs: Dict[str, Any] = Field(default_factory=dict)
  style: Optional[Dict[str, Any]] = None
  children: Optional[Union[List[Optional["UIDLNode"]], str, int, float]] = None
  dependency: Optional[DependencyRef] = None

  def child_nodes(self) -> List["UIDLNode"]:
    """Returns the non-null child nodes when children is a list, else an empty list."""
    if isinstance(self.children, list):
      return [child for child in self.children if child is not None]
    return []

  def depth_first(self) -> Iterator["UIDLNode"]:
    """Traverse the tree depth-first, yielding self then children."""
    yield self
    for child in self.child_nodes():
      yield from child.depth_first()


class PageMeta(UIDLModel):
  """Routing metadata attached to a page."""

  url: Optional[str] = None
  path: Optional[str] = None
  file_name: Optional[str] = None
  component_name: Optional[str] = None


class ComponentUIDL(UIDLModel):
  """
  A named component: the unit the generators work on.
  """

  name: str
  content: UIDLNode
  states: Dict[str, "PageState"] = Field(default_factory=dict)


class PageState(UIDLModel):
  """A page reachable from the project root."""

  component: ComponentUIDL
  default: bool = False
  meta: Optional[PageMeta] = None


ComponentUIDL.model_rebuild()


class StateValue(UIDLModel):
  """One value of a router state definition."""

  value: str
  meta: Optional[PageMeta] = None


class StateDefinition(UIDLModel):
  """Router state definition listing every page and the default one."""

  default_value: Optional[str] = None
  values: List[StateValue] = Field(default_factory=list)


class UIDLDocument(UIDLModel):
  """
  Top-level UIDL document.

  A `project` document carries a `root` component (whose states are the pages)
  and a `components` table. A `component` document carries `name` and `content`.
  """

  document_schema: DocumentSchema = Field(validation_alias=AliasChoices("schema", "document_schema"))
  name: Optional[str] = None
  content: Optional[UIDLNode] = None
  root: Optional[ComponentUIDL] = None
  components: Dict[str, ComponentUIDL] = Field(default_factory=dict)

  def as_component(self) -> ComponentUIDL:
    """
    Views a component document as a `ComponentUIDL`.

    Returns:
        ComponentUIDL: The component described by this document.

    Raises:
        ValueError: If the document has no content to generate.
    """
    if self.content is None:
      raise ValueError("Component document has no 'content' node.")
    return ComponentUIDL(name=self.name or "Component", content=self.content)
