"""
Component Structure.

The unit of work threaded through every pipeline stage. One instance is
created per component; it must never be shared between components generated
in parallel.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from uidl_codegen.core.chunks import Chunk, find_chunk
from uidl_codegen.core.resolver import Resolver
from uidl_codegen.uidl.schema import ComponentUIDL, DependencyRef


@dataclass
class ComponentStructure:
  """
  Shared state of one component's generation.

  Attributes:
      uidl (ComponentUIDL): The component description (read-only).
      resolver (Resolver): UIDL type -> target element lookup.
      chunks (List[Chunk]): Chunks produced so far.
      dependencies (Dict[str, DependencyRef]): Dependencies keyed by target element name.
  """

  uidl: ComponentUIDL
  resolver: Resolver
  chunks: List[Chunk] = field(default_factory=list)
  dependencies: Dict[str, DependencyRef] = field(default_factory=dict)

  def get_chunk(self, name: str) -> Optional[Chunk]:
    """Returns the chunk called `name`, if any stage produced it."""
    return find_chunk(self.chunks, name)
