"""
Exception Hierarchy for the Code Generation Pipeline.

All errors raised deliberately by the pipeline derive from `CodegenError` so
callers (e.g. the CLI) can separate configuration/input problems from bugs.
Plugin failures that are not `CodegenError` propagate unchanged.
"""

from typing import List, Sequence


class CodegenError(Exception):
  """Base class for all pipeline errors."""


class UnmappedElementError(CodegenError):
  """
  Raised when the resolver has no mapping for a UIDL node type.

  Attributes:
      element_type (str): The UIDL type that could not be resolved.
  """

  def __init__(self, element_type: str):
    self.element_type = element_type
    super().__init__(f"No element mapping found for UIDL type '{element_type}'.")


class ChunkLinkError(CodegenError):
  """Raised when the chunk set violates the linker contract."""


class ChunkCycleError(ChunkLinkError):
  """
  Raised when ordering or embedding constraints form a cycle.

  Attributes:
      chunk_names (List[str]): Names of the chunks involved in the cycle.
  """

  def __init__(self, chunk_names: Sequence[str]):
    self.chunk_names: List[str] = list(chunk_names)
    super().__init__(f"Cyclic chunk constraints between: {', '.join(self.chunk_names)}")


class InvalidDocumentError(CodegenError):
  """Raised when a UIDL document does not fit the requested operation."""


class UnknownTargetError(CodegenError):
  """Raised when a generator target key is not registered."""

  def __init__(self, target: str, known: Sequence[str]):
    self.target = target
    super().__init__(f"Unknown target: '{target}'. Supported targets: {list(known)}")
