"""
Enumerations for uidl-codegen.

This module defines standard enumerations shared by the UIDL schema,
the chunk model and the generator targets.
"""

from enum import Enum


class DependencyKind(str, Enum):
  """
  Origin of a component dependency.

  Only `PACKAGE` dependencies end up in the package manifest.
  """

  PACKAGE = "package"
  LOCAL = "local"


class ImportStyle(str, Enum):
  """
  Shape of the import statement generated for a dependency.
  """

  DEFAULT = "default"  # import X from 'p'
  NAMED = "named"  # import { X } from 'p'
  NAMED_ALIASED = "named-aliased"  # import { Original as X } from 'p'


class ChunkType(str, Enum):
  """
  Kind of content held by a chunk.
  """

  JS = "js"
  JSX = "jsx"


class DocumentSchema(str, Enum):
  """
  Top-level schema of a UIDL document.
  """

  PROJECT = "project"
  COMPONENT = "component"
