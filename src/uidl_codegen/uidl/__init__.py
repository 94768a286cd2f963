"""
UIDL Input Models.
"""

from uidl_codegen.uidl.schema import (
  ComponentUIDL,
  DependencyRef,
  PageMeta,
  PageState,
  StateDefinition,
  StateValue,
  UIDLDocument,
  UIDLNode,
)

__all__ = [
  "ComponentUIDL",
  "DependencyRef",
  "PageMeta",
  "PageState",
  "StateDefinition",
  "StateValue",
  "UIDLDocument",
  "UIDLNode",
]
