"""
End-to-end tests of the component generator for the bundled targets.
"""

import pytest

from uidl_codegen.config import RuntimeConfig
from uidl_codegen.core.errors import UnmappedElementError
from uidl_codegen.core.generator import ComponentGenerator, create_component_generator, render_chunks
from uidl_codegen.core.resolver import ElementResolver
from uidl_codegen.uidl.schema import ComponentUIDL

pytestmark = pytest.mark.asyncio

CARD = ComponentUIDL.model_validate(
  {
    "name": "Card",
    "content": {
      "type": "container",
      "name": "root",
      "style": {"padding": "10px"},
      "children": [{"type": "text", "name": "title", "children": "$props.title"}],
    },
  }
)

NAVIGATION = ComponentUIDL.model_validate(
  {
    "name": "Menu",
    "content": {
      "type": "navigation",
      "children": [
        {"type": "navlink", "attrs": {"url": "/"}, "children": "Home"},
        {"type": "link", "attrs": {"url": "https://example.com", "target": "_blank"}, "children": "Docs"},
      ],
    },
  }
)


async def test_inline_styles_target():
  result = await create_component_generator(RuntimeConfig(target="react.InlineStyles")).generate(CARD)

  assert result.code == (
    "import React from 'react'\n"
    "\n"
    "const Card = (props) => {\n"
    "  return (\n"
    "    <div style={{ padding: '10px' }}>\n"
    "      <span>{props.title}</span>\n"
    "    </div>\n"
    "  )\n"
    "}\n"
    "\n"
    "export default Card\n"
  )
  assert [c.name for c in result.chunks] == ["react-import", "react-pure-component", "react-component-export"]
  assert result.packages == {}


async def test_jss_target():
  result = await create_component_generator(RuntimeConfig(target="react.JSS")).generate(CARD)

  assert result.code == (
    "import React from 'react'\n"
    "\n"
    "import injectSheet from 'react-jss'\n"
    "\n"
    "const Card = (props) => {\n"
    "  const { classes } = props\n"
    "  return (\n"
    "    <div className={classes['root']}>\n"
    "      <span>{props.title}</span>\n"
    "    </div>\n"
    "  )\n"
    "}\n"
    "\n"
    "const style = {\n"
    "  root: { padding: '10px' },\n"
    "}\n"
    "\n"
    "export default injectSheet(style)(Card)\n"
  )
  assert result.packages == {"react-jss": "^8.6.1"}


async def test_bundled_mappings_and_router_dependency():
  result = await create_component_generator().generate(NAVIGATION)

  assert result.code.startswith("import { Link } from 'react-router-dom'\n\nimport React from 'react'\n")
  assert "<nav>" in result.code
  assert '<Link to="/">Home</Link>' in result.code
  assert '<a href="https://example.com" target="_blank">Docs</a>' in result.code
  assert result.packages == {"react-router-dom": "^5.0.0"}


async def test_unmapped_element_aborts():
  broken = ComponentUIDL.model_validate({"name": "Broken", "content": {"type": "carousel"}})
  with pytest.raises(UnmappedElementError):
    await create_component_generator().generate(broken)


async def test_fallback_element_from_config():
  broken = ComponentUIDL.model_validate({"name": "Lenient", "content": {"type": "carousel"}})
  result = await create_component_generator(RuntimeConfig(fallback_element="div")).generate(broken)
  assert "<div />" in result.code


async def test_custom_mapping_overlay(tmp_path):
  mapping = tmp_path / "mapping.json"
  mapping.write_text('{"container": {"name": "section"}}', encoding="utf-8")

  result = await create_component_generator(RuntimeConfig(custom_mapping=mapping)).generate(CARD)
  assert "<section style=" in result.code


async def test_plugin_settings_override():
  generator = create_component_generator(
    RuntimeConfig(target="react.JSS"), plugin_settings={"jss_declaration_name": "sheet"}
  )
  result = await generator.generate(CARD)
  assert "export default injectSheet(sheet)(Card)" in result.code


async def test_generator_is_reusable_across_components():
  generator = create_component_generator()
  first = await generator.generate(CARD)
  second = await generator.generate(CARD)
  assert first.code == second.code


async def test_generator_with_explicit_plugins():
  resolver = ElementResolver({"container": {"name": "div"}, "text": {"name": "span"}})
  result = await ComponentGenerator(resolver, plugins=[]).generate(CARD)
  assert result.chunks == []
  assert result.code == "\n"


def test_render_chunks_accepts_plain_content():
  from uidl_codegen.core.chunks import Chunk

  assert render_chunks([Chunk(type="js", name="a", content="// a"), Chunk(type="js", name="b", content="// b")]) == (
    "// a\n\n// b\n"
  )
