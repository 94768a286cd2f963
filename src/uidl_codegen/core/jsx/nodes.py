"""
JSX / JavaScript Syntax Tree Nodes.

This module defines the mutable tree produced by the generators. Like a
concrete syntax tree, every node owns its textual rendering via `to_text()`,
so an assembled chunk set can be printed without a separate printer.

Element nodes (`JSXElement`) are deliberately mutable: later pipeline stages
reach them through the identity map and attach attributes in place.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

INDENT = "  "
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_JSX_TEXT_ENTITIES = {"{": "&#123;", "}": "&#125;", "<": "&lt;", ">": "&gt;"}
_JSX_TEXT_ESCAPES = re.compile(r"[{}<>]")


def _indent(text: str, level: int = 1) -> str:
  """Prefixes every non-empty line of `text` with `level` indentation units."""
  pad = INDENT * level
  return "\n".join(pad + line if line else line for line in text.split("\n"))


def _quote(value: str) -> str:
  escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
  return f"'{escaped}'"


def _property_key(key: str) -> str:
  return key if _IDENTIFIER.match(key) else _quote(key)


def render_literal(value: Any) -> str:
  """
  Renders a Python value as a JavaScript literal.

  Args:
      value: A scalar, list, dict or `JSNode`.

  Returns:
      str: JavaScript source text.
  """
  if isinstance(value, JSNode):
    return value.to_text()
  if value is None:
    return "null"
  if isinstance(value, bool):
    return "true" if value else "false"
  if isinstance(value, (int, float)):
    return repr(value)
  if isinstance(value, str):
    return _quote(value)
  if isinstance(value, dict):
    return ObjectExpression(dict(value)).to_text()
  if isinstance(value, (list, tuple)):
    return "[" + ", ".join(render_literal(v) for v in value) + "]"
  return _quote(str(value))


@dataclass
class JSNode(ABC):
  """Abstract base class for all generated nodes."""

  @abstractmethod
  def to_text(self) -> str:
    """
    Render this node to its source representation.

    Returns:
        str: JavaScript/JSX source for this construct.
    """
    pass


@dataclass
class Identifier(JSNode):
  """A bare JavaScript identifier or member path (e.g. `props.title`)."""

  name: str

  def to_text(self) -> str:
    return self.name


@dataclass
class RawExpression(JSNode):
  """An opaque expression emitted verbatim (e.g. `classes['title']`)."""

  code: str

  def to_text(self) -> str:
    return self.code


@dataclass
class ObjectExpression(JSNode):
  """
  An object literal. Flat objects render on one line, objects containing
  nested objects render one property per line.
  """

  properties: dict = field(default_factory=dict)

  def to_text(self) -> str:
    if not self.properties:
      return "{}"
    parts = [f"{_property_key(str(k))}: {render_literal(v)}" for k, v in self.properties.items()]
    nested = any(isinstance(v, (dict, ObjectExpression)) for v in self.properties.values())
    if not nested:
      return "{ " + ", ".join(parts) + " }"
    body = ",\n".join(_indent(part) for part in parts)
    return "{\n" + body + ",\n}"


@dataclass
class CallExpression(JSNode):
  """A call `callee(arg, ...)`."""

  callee: JSNode
  arguments: List[Any] = field(default_factory=list)

  def to_text(self) -> str:
    args = ", ".join(render_literal(a) for a in self.arguments)
    return f"{self.callee.to_text()}({args})"


@dataclass
class JSXText(JSNode):
  """Static text inside an element. Braces and angle brackets are escaped as entities."""

  value: str

  def to_text(self) -> str:
    return _JSX_TEXT_ESCAPES.sub(lambda m: _JSX_TEXT_ENTITIES[m.group(0)], self.value)


@dataclass
class JSXDynamicChild(JSNode):
  """
  A child bound to a component input, e.g. `{props.title}`.

  Attributes:
      reference (str): Unprefixed reference name ('title').
      scope (str): Object the reference is read from.
  """

  reference: str
  scope: str = "props"

  def to_text(self) -> str:
    return "{" + f"{self.scope}.{self.reference}" + "}"


@dataclass
class JSXAttribute(JSNode):
  """
  A single attribute on an opening tag.

  String values render as `name="value"`; everything else is wrapped in an
  expression container (`name={...}`).
  """

  name: str
  value: Any = True

  def to_text(self) -> str:
    if self.value is True:
      return self.name
    if isinstance(self.value, str):
      escaped = self.value.replace('"', "&quot;")
      return f'{self.name}="{escaped}"'
    return f"{self.name}={{{render_literal(self.value)}}}"


@dataclass
class JSXElement(JSNode):
  """
  A JSX tag with ordered attributes and children.
  """

  tag: str
  attributes: List[JSXAttribute] = field(default_factory=list)
  children: List[JSNode] = field(default_factory=list)

  def get_attribute(self, name: str) -> Optional[JSXAttribute]:
    """Returns the attribute called `name`, if set."""
    for attr in self.attributes:
      if attr.name == name:
        return attr
    return None

  def set_attribute(self, name: str, value: Any) -> JSXAttribute:
    """
    Sets an attribute, replacing the value in place when it already exists
    so attribute order stays stable.
    """
    existing = self.get_attribute(name)
    if existing is not None:
      existing.value = value
      return existing
    attr = JSXAttribute(name=name, value=value)
    self.attributes.append(attr)
    return attr

  def add_child(self, child: JSNode) -> JSNode:
    """Appends a child node and returns it for chaining."""
    self.children.append(child)
    return child

  def to_text(self) -> str:
    opening = "<" + self.tag + "".join(" " + a.to_text() for a in self.attributes)
    if not self.children:
      return opening + " />"

    if all(isinstance(c, (JSXText, JSXDynamicChild)) for c in self.children):
      inner = "".join(c.to_text() for c in self.children)
      return f"{opening}>{inner}</{self.tag}>"

    body = "\n".join(_indent(c.to_text()) for c in self.children)
    return f"{opening}>\n{body}\n</{self.tag}>"


@dataclass
class ImportStatement(JSNode):
  """
  `import Default, { a, b as c } from 'source'`.

  Attributes:
      source (str): Module path.
      default (Optional[str]): Local name of the default import.
      named (List[Tuple[str, str]]): (exported name, local name) pairs.
  """

  source: str
  default: Optional[str] = None
  named: List[Tuple[str, str]] = field(default_factory=list)

  def add_named(self, exported: str, local: Optional[str] = None) -> None:
    """Adds a named specifier unless an identical one is present."""
    pair = (exported, local or exported)
    if pair not in self.named:
      self.named.append(pair)

  def to_text(self) -> str:
    specifiers = []
    if self.default:
      specifiers.append(self.default)
    if self.named:
      names = [exported if exported == local else f"{exported} as {local}" for exported, local in self.named]
      specifiers.append("{ " + ", ".join(names) + " }")
    if not specifiers:
      return f"import {_quote(self.source)}"
    return f"import {', '.join(specifiers)} from {_quote(self.source)}"


@dataclass
class ConstAssign(JSNode):
  """`const name = value`."""

  name: str
  value: Any

  def to_text(self) -> str:
    return f"const {self.name} = {render_literal(self.value)}"


@dataclass
class DefaultExport(JSNode):
  """`export default expression`."""

  expression: JSNode

  def to_text(self) -> str:
    return f"export default {self.expression.to_text()}"


@dataclass
class ArrowComponent(JSNode):
  """
  A functional component returning its JSX body.

  Structure:
      const Name = (props) => {
        <statements>
        return (
          <body />
        )
      }
  """

  name: str
  params: List[str] = field(default_factory=lambda: ["props"])
  body: Optional[JSNode] = None
  statements: List[JSNode] = field(default_factory=list)

  def to_text(self) -> str:
    params = ", ".join(self.params)
    if self.body is None:
      returned = "return null"
    else:
      returned = "return (\n" + _indent(self.body.to_text()) + "\n)"
    lines = [statement.to_text() for statement in self.statements] + [returned]
    inner = _indent("\n".join(lines))
    return f"const {self.name} = ({params}) => {{\n{inner}\n}}"
