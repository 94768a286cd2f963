"""
Tests for the React component shell plugin.
"""

import pytest

from uidl_codegen.core.chunks import Chunk, EmbedDefinition, LinkerSpec
from uidl_codegen.core.errors import ChunkLinkError
from uidl_codegen.core.jsx.nodes import ArrowComponent, ConstAssign, Identifier, JSXElement
from uidl_codegen.core.linker import link
from uidl_codegen.plugins import react_component, react_jsx

pytestmark = pytest.mark.asyncio

COMPONENT = {"name": "Card", "content": {"type": "container", "name": "root"}}


async def test_emits_import_component_and_export(make_structure):
  structure = await react_component.create_plugin()(make_structure(COMPONENT))

  assert [c.name for c in structure.chunks] == ["react-import", "react-pure-component", "react-component-export"]
  assert structure.get_chunk("react-import").content.to_text() == "import React from 'react'"
  assert isinstance(structure.get_chunk("react-pure-component").content, ArrowComponent)
  assert structure.get_chunk("react-pure-component").after == ["react-import"]
  assert structure.get_chunk("react-component-export").content.to_text() == "export default Card"
  assert structure.get_chunk("react-component-export").after == ["react-pure-component"]


async def test_jsx_is_embedded_as_component_body(make_structure):
  structure = make_structure(COMPONENT)
  structure = await react_jsx.create_plugin()(structure)
  structure = await react_component.create_plugin()(structure)

  linked = link(structure.chunks)
  assert [c.name for c in linked] == ["react-import", "react-pure-component", "react-component-export"]

  component = linked[1].content
  assert isinstance(component.body, JSXElement)
  assert component.body.tag == "div"


async def test_existing_export_content_is_kept(make_structure):
  structure = make_structure(COMPONENT)
  structure.chunks.append(
    Chunk(type="js", name="react-component-export", content="wrapped", linker=LinkerSpec(after=["X"]))
  )
  structure = await react_component.create_plugin()(structure)

  export = structure.get_chunk("react-component-export")
  assert export.content == "wrapped"
  assert export.after == ["X", "react-pure-component"]


async def test_component_slot_accepts_a_single_chunk(make_structure):
  structure = await react_component.create_plugin()(make_structure(COMPONENT))
  embed = EmbedDefinition(chunk_name="react-pure-component", slot="component-jsx")
  structure.chunks.append(Chunk(type="jsx", name="a", content=JSXElement("a"), linker=LinkerSpec(embed=embed)))
  structure.chunks.append(Chunk(type="jsx", name="b", content=JSXElement("b"), linker=LinkerSpec(embed=embed)))

  with pytest.raises(ChunkLinkError, match="rejected"):
    link(structure.chunks)


async def test_statements_slot_collects_statements_before_return(make_structure):
  structure = await react_component.create_plugin()(make_structure(COMPONENT))
  structure.chunks.append(
    Chunk(
      type="js",
      name="binding",
      content=ConstAssign("{ title }", Identifier("props")),
      linker=LinkerSpec(embed=EmbedDefinition(chunk_name="react-pure-component", slot="component-statements")),
    )
  )

  link(structure.chunks)
  assert structure.get_chunk("react-pure-component").content.to_text() == (
    "const Card = (props) => {\n  const { title } = props\n  return null\n}"
  )
