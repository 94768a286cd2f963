"""
Tests for `merge_chunk`.

Merging must never drop ordering constraints set by an earlier stage.
"""

from uidl_codegen.core.chunks import Chunk, EmbedDefinition, LinkerSpec, find_chunk, merge_chunk


def _export(content: str, after=None) -> Chunk:
  return Chunk(type="js", name="export", content=content, linker=LinkerSpec(after=after or []))


def test_new_chunk_is_appended():
  chunks = []
  merged = merge_chunk(chunks, _export("a"))
  assert chunks == [merged]


def test_existing_chunk_content_replaced_and_after_appended():
  chunks = [_export("old", after=["X"])]
  merged = merge_chunk(chunks, _export("new", after=["Y", "Z"]))

  assert len(chunks) == 1
  assert merged is chunks[0]
  assert merged.content == "new"
  assert merged.after == ["X", "Y", "Z"]


def test_content_kept_when_not_replacing():
  chunks = [_export("wrapped", after=["jss"])]
  merge_chunk(chunks, _export("plain", after=["component"]), replace_content=False)

  assert chunks[0].content == "wrapped"
  assert chunks[0].after == ["jss", "component"]


def test_duplicate_constraints_not_repeated():
  chunks = [_export("a", after=["X", "Y"])]
  merge_chunk(chunks, _export("b", after=["Y", "X", "Z"]))
  assert chunks[0].after == ["X", "Y", "Z"]


def test_existing_chunk_without_linker_gains_one():
  chunks = [Chunk(type="js", name="export", content="a")]
  merge_chunk(chunks, _export("b", after=["S"]))
  assert chunks[0].after == ["S"]


def test_slots_and_embed_are_kept():
  first_slot = lambda chunks: True  # noqa: E731
  second_slot = lambda chunks: False  # noqa: E731
  existing = Chunk(
    type="jsx",
    name="tree",
    content=None,
    linker=LinkerSpec(embed=EmbedDefinition("component", "jsx"), slots={"children": first_slot}),
  )
  incoming = Chunk(
    type="jsx",
    name="tree",
    content=None,
    linker=LinkerSpec(embed=EmbedDefinition("other", "x"), slots={"children": second_slot, "extra": second_slot}),
  )
  chunks = [existing]
  merge_chunk(chunks, incoming)

  assert existing.linker.embed == EmbedDefinition("component", "jsx")
  assert existing.linker.slots["children"] is first_slot
  assert existing.linker.slots["extra"] is second_slot


def test_meta_is_updated():
  chunks = [Chunk(type="js", name="c", content=1, meta={"usage": "import", "a": 1})]
  merge_chunk(chunks, Chunk(type="js", name="c", content=2, meta={"a": 2}))
  assert chunks[0].meta == {"usage": "import", "a": 2}


def test_find_chunk():
  chunks = [_export("a")]
  assert find_chunk(chunks, "export") is chunks[0]
  assert find_chunk(chunks, "missing") is None
