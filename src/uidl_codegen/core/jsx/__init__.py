"""
JSX Target Tree.
"""

from uidl_codegen.core.jsx.nodes import (
  ArrowComponent,
  CallExpression,
  ConstAssign,
  DefaultExport,
  Identifier,
  ImportStatement,
  JSNode,
  JSXAttribute,
  JSXDynamicChild,
  JSXElement,
  JSXText,
  ObjectExpression,
  RawExpression,
  render_literal,
)

__all__ = [
  "ArrowComponent",
  "CallExpression",
  "ConstAssign",
  "DefaultExport",
  "Identifier",
  "ImportStatement",
  "JSNode",
  "JSXAttribute",
  "JSXDynamicChild",
  "JSXElement",
  "JSXText",
  "ObjectExpression",
  "RawExpression",
  "render_literal",
]
