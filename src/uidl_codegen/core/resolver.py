"""
Element Resolver.

Maps a UIDL node type (e.g. 'container', 'link') to the element of a concrete
target framework. The mapping is plain data: a table of `MappedElement` entries
keyed by UIDL type, optionally overlaid by further tables (e.g. a caller-provided
custom mapping). Overlays replace whole entries by type name; the last overlay wins.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from uidl_codegen.core.errors import UnmappedElementError
from uidl_codegen.core.references import attrs_reference
from uidl_codegen.uidl.schema import DependencyRef


@dataclass(frozen=True)
class LiteralRule:
  """Always set the target attribute to `value`."""

  value: Any


@dataclass(frozen=True)
class BindingRule:
  """Copy UIDL `attrs[source_key]` onto the target attribute if present, else omit it."""

  source_key: str


AttrMappingRule = Union[LiteralRule, BindingRule]


class MappedElement(BaseModel):
  """
  Resolver output describing the target element for a UIDL type.
  """

  model_config = ConfigDict(frozen=True, extra="ignore")

  name: str = Field(description="Target element (tag) name, e.g. 'div' or 'Link'.")
  attrs: Dict[str, Any] = Field(
    default_factory=dict,
    description="Target attribute -> literal value, or '$attrs.<key>' to alias a UIDL attribute.",
  )
  dependency: Optional[DependencyRef] = Field(None, description="Where the element is imported from.")

  def attribute_rules(self) -> List[Tuple[str, AttrMappingRule]]:
    """
    Parses the raw attribute table into typed rules, in declaration order.
    Empty values carry no rule and are dropped.

    Returns:
        List[Tuple[str, AttrMappingRule]]: (target attribute, rule) pairs.
    """
    rules: List[Tuple[str, AttrMappingRule]] = []
    for key, value in self.attrs.items():
      if value is None or value == "":
        continue
      source_key = attrs_reference(value)
      if source_key is not None:
        rules.append((key, BindingRule(source_key)))
      else:
        rules.append((key, LiteralRule(value)))
    return rules


Resolver = Callable[[str], MappedElement]
MappingTable = Dict[str, MappedElement]


def build_mapping_table(raw: Mapping[str, Any]) -> MappingTable:
  """
  Validates a raw `{uidl_type: {...}}` dictionary into a mapping table.

  Args:
      raw: Parsed JSON mapping.

  Returns:
      MappingTable: Validated entries.
  """
  return {key: value if isinstance(value, MappedElement) else MappedElement.model_validate(value) for key, value in raw.items()}


class ElementResolver:
  """
  Stateless lookup from UIDL type to `MappedElement`.

  Instances are callable so they satisfy the `Resolver` signature and can be
  shared read-only between components generated in parallel.
  """

  def __init__(
    self,
    mapping: Mapping[str, Any],
    overlays: Optional[Iterable[Mapping[str, Any]]] = None,
    fallback: Optional[MappedElement] = None,
  ):
    """
    Initializes the resolver.

    Args:
        mapping: Base table for the target framework.
        overlays: Tables applied on top of the base, in order. Later entries win.
        fallback: Element returned for unmapped types. If None, unmapped types are fatal.
    """
    table = build_mapping_table(mapping)
    for overlay in overlays or []:
      table.update(build_mapping_table(overlay))
    self._table: MappingTable = table
    self._fallback = fallback

  @property
  def element_types(self) -> List[str]:
    """UIDL types known to this resolver."""
    return list(self._table.keys())

  def resolve(self, element_type: str) -> MappedElement:
    """
    Resolves a UIDL type.

    Args:
        element_type: The `type` field of a UIDL node.

    Returns:
        MappedElement: The configured target element.

    Raises:
        UnmappedElementError: If the type is unknown and no fallback is configured.
    """
    mapped = self._table.get(element_type)
    if mapped is not None:
      return mapped
    if self._fallback is not None:
      return self._fallback
    raise UnmappedElementError(element_type)

  def __call__(self, element_type: str) -> MappedElement:
    return self.resolve(element_type)

  def __contains__(self, element_type: str) -> bool:
    return element_type in self._table
