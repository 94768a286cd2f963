"""
Tree Builder.

Walks a UIDL content tree depth-first, resolves each node to its target element
and builds the corresponding JSX tree. While walking it records:

- an identity map from UIDL node name to the generated tag, so later stages can
  decorate tags without walking the UIDL and the JSX tree in lockstep;
- the dependencies required by the generated elements, keyed by element name.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from uidl_codegen.core.jsx import builders
from uidl_codegen.core.jsx.nodes import Identifier, JSXElement
from uidl_codegen.core.references import is_reference, props_reference
from uidl_codegen.core.resolver import BindingRule, LiteralRule, MappedElement, Resolver
from uidl_codegen.uidl.schema import DependencyRef, UIDLNode


@dataclass
class BuildResult:
  """
  Output of a tree build.

  Attributes:
      root (JSXElement): Tag generated for the root UIDL node.
      mappings (Dict[str, JSXElement]): UIDL node name -> generated tag.
      dependencies (Dict[str, DependencyRef]): Target element name -> dependency copy.
  """

  root: JSXElement
  mappings: Dict[str, JSXElement] = field(default_factory=dict)
  dependencies: Dict[str, DependencyRef] = field(default_factory=dict)


def add_attributes_to_tag(tag: JSXElement, mapped_element: MappedElement, attrs: Mapping[str, Any]) -> None:
  """
  Sets the attributes of a freshly created tag.

  Mapping rules are applied first. Binding rules (`$attrs.<key>`) rename a UIDL
  attribute (e.g. 'url' becomes 'href'); the UIDL key is then consumed and not
  copied again. Remaining UIDL attributes are passed through verbatim, except
  for reserved-sigil references.

  Args:
      tag: The tag under construction.
      mapped_element: Resolver output for the node.
      attrs: Attributes declared on the UIDL node.
  """
  consumed: List[str] = []

  for key, rule in mapped_element.attribute_rules():
    if isinstance(rule, BindingRule):
      value = attrs.get(rule.source_key)
      if value is None:
        continue
      bound = props_reference(value)
      if bound is not None:
        tag.set_attribute(key, Identifier(f"props.{bound}"))
      else:
        tag.set_attribute(key, value)
      consumed.append(rule.source_key)
    elif isinstance(rule, LiteralRule):
      tag.set_attribute(key, rule.value)

  for key, value in attrs.items():
    if key in consumed or value is None or is_reference(value):
      continue
    tag.set_attribute(key, value)


def generate_tree_structure(
  node: UIDLNode,
  resolver: Resolver,
  mappings: Dict[str, JSXElement],
  dependencies: Dict[str, DependencyRef],
) -> JSXElement:
  """
  Recursively builds the tag for `node` and its descendants.

  Args:
      node: UIDL node to convert.
      resolver: UIDL type -> MappedElement lookup.
      mappings: Identity map, populated in place.
      dependencies: Dependency table, populated in place.

  Returns:
      JSXElement: The tag for `node`.

  Raises:
      UnmappedElementError: If any node type cannot be resolved.
  """
  mapped_element = resolver(node.type)
  tag = builders.make_tag(mapped_element.name)
  add_attributes_to_tag(tag, mapped_element, node.attrs)

  # UIDL-level dependency wins over the mapping one
  dependency = node.dependency or mapped_element.dependency
  if dependency is not None:
    dependencies[mapped_element.name] = dependency.model_copy(deep=True)

  if isinstance(node.children, list):
    for child in node.children:
      if child is None:
        continue
      builders.add_child_tag(tag, generate_tree_structure(child, resolver, mappings, dependencies))
  elif node.children is not None:
    bound = props_reference(node.children)
    if bound is not None:
      builders.add_dynamic_child(tag, bound)
    else:
      builders.add_child_text(tag, str(node.children))

  if node.name is not None:
    mappings[node.name] = tag

  return tag


def build_tree(node: UIDLNode, resolver: Resolver) -> BuildResult:
  """
  Builds the target tree for a component's content.

  Args:
      node: Root UIDL node of the component.
      resolver: UIDL type -> MappedElement lookup.

  Returns:
      BuildResult: Root tag, identity map and dependencies.
  """
  mappings: Dict[str, JSXElement] = {}
  dependencies: Dict[str, DependencyRef] = {}
  root = generate_tree_structure(node, resolver, mappings, dependencies)
  return BuildResult(root=root, mappings=mappings, dependencies=dependencies)
