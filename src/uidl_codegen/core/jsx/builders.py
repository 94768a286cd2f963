"""
Builders for JSX and JavaScript nodes.

Small helpers used by the tree builder and the plugins so they never need to
know the internal layout of the node classes.
"""

from typing import Any, Mapping

from uidl_codegen.core.jsx.nodes import (
  CallExpression,
  ConstAssign,
  DefaultExport,
  Identifier,
  ImportStatement,
  JSXDynamicChild,
  JSXElement,
  JSXText,
  ObjectExpression,
  RawExpression,
)


def make_tag(tag_name: str) -> JSXElement:
  """Creates an empty element."""
  return JSXElement(tag=tag_name)


def add_dynamic_attribute(tag: JSXElement, name: str, expression: str) -> None:
  """Sets an attribute whose value is an expression, e.g. `className={classes['x']}`."""
  tag.set_attribute(name, RawExpression(expression))


def add_child_tag(tag: JSXElement, child: JSXElement) -> None:
  tag.add_child(child)


def add_child_text(tag: JSXElement, text: str) -> None:
  tag.add_child(JSXText(text))


def add_dynamic_child(tag: JSXElement, reference: str, scope: str = "props") -> None:
  """Appends a `{props.<reference>}` placeholder."""
  tag.add_child(JSXDynamicChild(reference=reference, scope=scope))


def add_tag_styles(tag: JSXElement, style: Mapping[str, Any]) -> None:
  """
  Attaches a style map as an inline `style={{...}}` attribute.

  If the tag already carries an inline style object the new keys are merged
  into it, later keys winning.
  """
  existing = tag.get_attribute("style")
  if existing is not None and isinstance(existing.value, ObjectExpression):
    existing.value.properties.update(style)
    return
  tag.set_attribute("style", ObjectExpression(dict(style)))


def object_to_expression(values: Mapping[str, Any]) -> ObjectExpression:
  """Wraps a (possibly nested) dict in an object literal node."""
  return ObjectExpression(dict(values))


def make_default_import(name: str, source: str) -> ImportStatement:
  """`import name from 'source'`."""
  return ImportStatement(source=source, default=name)


def make_const_assign(name: str, value: Any) -> ConstAssign:
  return ConstAssign(name=name, value=value)


def make_default_export(name: str) -> DefaultExport:
  """`export default Name`."""
  return DefaultExport(Identifier(name))


def make_jss_default_export(component_name: str, styles_name: str, wrapper: str = "injectSheet") -> DefaultExport:
  """`export default injectSheet(styles)(Component)`."""
  hoc = CallExpression(Identifier(wrapper), [Identifier(styles_name)])
  return DefaultExport(CallExpression(hoc, [Identifier(component_name)]))

