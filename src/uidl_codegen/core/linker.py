"""
Chunk Linker.

Turns the unordered chunk set of a component into a linear sequence:

1. Embedding: every chunk declaring `embed={chunk_name, slot}` is handed to
   the slot resolver of its host chunk and removed from the top level.
2. Ordering: `after` / `before` constraints form a directed graph over the
   remaining chunks (constraints on embedded chunks apply to their top-level
   host). A topological sort orders the chunks; ties keep insertion order.

Cycles are configuration errors and are reported, never broken.
"""

import heapq
import logging
from collections import defaultdict
from typing import Dict, List, Optional, Set, Tuple

from uidl_codegen.core.chunks import Chunk
from uidl_codegen.core.errors import ChunkCycleError, ChunkLinkError

logger = logging.getLogger(__name__)


def _embed_hosts(chunks: List[Chunk], by_name: Dict[str, Chunk]) -> Dict[str, str]:
  """Maps each embedded chunk name to the name of its direct host."""
  hosts: Dict[str, str] = {}
  for chunk in chunks:
    embed = chunk.linker.embed if chunk.linker else None
    if embed is None:
      continue
    if embed.chunk_name not in by_name:
      logger.warning(
        f"Chunk '{chunk.name}' embeds into missing chunk '{embed.chunk_name}'; keeping it at top level."
      )
      continue
    hosts[chunk.name] = embed.chunk_name
  return hosts


def _check_embed_cycles(hosts: Dict[str, str]) -> None:
  """Each chunk has at most one host, so a cycle is a revisited chain."""
  cleared: Set[str] = set()
  for start in hosts:
    path: List[str] = []
    current: Optional[str] = start
    while current is not None and current not in cleared:
      if current in path:
        raise ChunkCycleError(path[path.index(current) :])
      path.append(current)
      current = hosts.get(current)
    cleared.update(path)


def _top_host(name: str, hosts: Dict[str, str]) -> str:
  while name in hosts:
    name = hosts[name]
  return name


def _depth(name: str, hosts: Dict[str, str]) -> int:
  depth = 0
  while name in hosts:
    name = hosts[name]
    depth += 1
  return depth


def _resolve_slots(chunks: List[Chunk], by_name: Dict[str, Chunk], hosts: Dict[str, str]) -> None:
  """
  Hands embedded chunks to their host's slot resolvers.

  Deeper hosts are resolved first so a host is complete before it is itself
  embedded. Candidates keep insertion order.
  """
  groups: Dict[Tuple[str, str], List[Chunk]] = {}
  for chunk in chunks:
    if chunk.name not in hosts:
      continue
    groups.setdefault((hosts[chunk.name], chunk.linker.embed.slot), []).append(chunk)

  ordered = sorted(groups.items(), key=lambda item: -_depth(item[0][0], hosts))
  for (host_name, slot), candidates in ordered:
    host = by_name[host_name]
    resolver = host.linker.slots.get(slot) if host.linker else None
    claimants = ", ".join(c.name for c in candidates)
    if resolver is None:
      raise ChunkLinkError(f"Chunk '{host_name}' has no slot '{slot}' (claimed by: {claimants}).")
    if not resolver(candidates):
      raise ChunkLinkError(f"Slot '{slot}' of chunk '{host_name}' rejected: {claimants}.")


def _find_cycle(edges: Dict[str, List[str]], remaining: List[str]) -> List[str]:
  """Extracts one cycle from the nodes a topological sort could not emit."""
  pending = set(remaining)
  for start in remaining:
    path: List[str] = []
    on_path: Set[str] = set()
    visited: Set[str] = set()
    stack = [(start, iter(edges[start]))]
    path.append(start)
    on_path.add(start)
    while stack:
      node, successors = stack[-1]
      advanced = False
      for nxt in successors:
        if nxt not in pending:
          continue
        if nxt in on_path:
          return path[path.index(nxt) :]
        if nxt in visited:
          continue
        stack.append((nxt, iter(edges[nxt])))
        path.append(nxt)
        on_path.add(nxt)
        advanced = True
        break
      if not advanced:
        stack.pop()
        visited.add(node)
        on_path.discard(path.pop())
  return remaining


def link(chunks: List[Chunk]) -> List[Chunk]:
  """
  Orders and merges a component's chunks.

  Args:
      chunks: The final chunk set of a component. Embedded chunks have their
          content spliced into their host, which mutates host content.

  Returns:
      List[Chunk]: Top-level chunks in emission order.

  Raises:
      ChunkLinkError: On duplicate names, missing slots or rejected embeddings.
      ChunkCycleError: If ordering or embedding constraints are cyclic.
  """
  by_name: Dict[str, Chunk] = {}
  for chunk in chunks:
    if chunk.name in by_name:
      raise ChunkLinkError(f"Duplicate chunk name: '{chunk.name}'.")
    by_name[chunk.name] = chunk
  index = {chunk.name: i for i, chunk in enumerate(chunks)}

  hosts = _embed_hosts(chunks, by_name)
  _check_embed_cycles(hosts)
  _resolve_slots(chunks, by_name, hosts)

  top_level = [chunk for chunk in chunks if chunk.name not in hosts]
  edges: Dict[str, List[str]] = defaultdict(list)
  in_degree: Dict[str, int] = {chunk.name: 0 for chunk in top_level}

  def add_edge(first: str, then: str) -> None:
    first, then = _top_host(first, hosts), _top_host(then, hosts)
    if first == then or then in edges[first]:
      return
    edges[first].append(then)
    in_degree[then] += 1

  for chunk in chunks:
    for name in chunk.after:
      if name not in by_name:
        logger.debug(f"Chunk '{chunk.name}': ignoring 'after' constraint on absent chunk '{name}'.")
        continue
      add_edge(name, chunk.name)
    for name in chunk.before:
      if name not in by_name:
        logger.debug(f"Chunk '{chunk.name}': ignoring 'before' constraint on absent chunk '{name}'.")
        continue
      add_edge(chunk.name, name)

  ready = [index[chunk.name] for chunk in top_level if in_degree[chunk.name] == 0]
  heapq.heapify(ready)
  ordered: List[Chunk] = []
  while ready:
    current = chunks[heapq.heappop(ready)]
    ordered.append(current)
    for nxt in edges[current.name]:
      in_degree[nxt] -= 1
      if in_degree[nxt] == 0:
        heapq.heappush(ready, index[nxt])

  if len(ordered) < len(top_level):
    emitted = {chunk.name for chunk in ordered}
    remaining = [chunk.name for chunk in top_level if chunk.name not in emitted]
    raise ChunkCycleError(_find_cycle(edges, remaining))

  return ordered
