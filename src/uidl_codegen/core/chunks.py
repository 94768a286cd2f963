"""
Chunk Model.

A chunk is a named fragment of generated output (an import, a declaration,
the JSX tree, an export...). Plugins produce chunks independently and declare
how they relate to each other; the linker turns the set into one file.

Ordering metadata lives in `LinkerSpec`:
- `after`: chunks that must precede this one.
- `before`: chunks that must follow this one.
- `embed`: splice this chunk into a slot of another chunk instead of emitting it.
- `slots`: resolvers accepting chunks embedded into this one.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

SlotResolver = Callable[[List["Chunk"]], bool]
"""Receives the chunks claiming a slot; splices them into the owner and returns acceptance."""


@dataclass
class EmbedDefinition:
  """Target of an embedding relation."""

  chunk_name: str
  slot: str


@dataclass
class LinkerSpec:
  """Ordering and embedding constraints of a chunk."""

  after: List[str] = field(default_factory=list)
  before: List[str] = field(default_factory=list)
  embed: Optional[EmbedDefinition] = None
  slots: Dict[str, SlotResolver] = field(default_factory=dict)


@dataclass
class Chunk:
  """
  A named fragment of generated code.

  Attributes:
      type (str): Content kind ('js', 'jsx').
      name (str): Unique name within the component's chunk set.
      content (Any): A target tree node or any opaque renderable node.
      meta (Dict[str, Any]): Free-form metadata (e.g. 'usage', 'uidl_mappings').
      linker (Optional[LinkerSpec]): Ordering/embedding constraints.
  """

  type: str
  name: str
  content: Any
  meta: Dict[str, Any] = field(default_factory=dict)
  linker: Optional[LinkerSpec] = None

  def ensure_linker(self) -> LinkerSpec:
    """Returns the linker spec, creating an empty one if missing."""
    if self.linker is None:
      self.linker = LinkerSpec()
    return self.linker

  @property
  def after(self) -> List[str]:
    return self.linker.after if self.linker else []

  @property
  def before(self) -> List[str]:
    return self.linker.before if self.linker else []


def find_chunk(chunks: Iterable[Chunk], name: str) -> Optional[Chunk]:
  """Returns the chunk called `name`, if present."""
  for chunk in chunks:
    if chunk.name == name:
      return chunk
  return None


def _append_unique(target: List[str], items: Iterable[str]) -> None:
  for item in items:
    if item not in target:
      target.append(item)


def merge_chunk(chunks: List[Chunk], incoming: Chunk, replace_content: bool = True) -> Chunk:
  """
  Adds `incoming` to the chunk list, merging with an existing chunk of the same name.

  Merging never discards constraints established by earlier stages:
  - content is replaced only when `replace_content` is True,
  - `after` / `before` lists are appended to (existing entries first, no duplicates),
  - slots are added, existing resolvers are kept,
  - an existing embed definition is kept,
  - meta keys are updated.

  Args:
      chunks: The component's chunk list (mutated in place).
      incoming: The chunk produced by the current stage.
      replace_content: Whether the incoming content supersedes the existing one.

  Returns:
      Chunk: The chunk that now lives in the list.
  """
  existing = find_chunk(chunks, incoming.name)
  if existing is None:
    chunks.append(incoming)
    return incoming

  if replace_content:
    existing.content = incoming.content
  existing.meta.update(incoming.meta)

  if incoming.linker is not None:
    spec = existing.ensure_linker()
    _append_unique(spec.after, incoming.linker.after)
    _append_unique(spec.before, incoming.linker.before)
    if spec.embed is None:
      spec.embed = incoming.linker.embed
    for slot, resolver in incoming.linker.slots.items():
      spec.slots.setdefault(slot, resolver)

  return existing
