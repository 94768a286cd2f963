"""Tests for the top-level convenience API."""

import pytest

import uidl_codegen
from uidl_codegen import generate_component
from uidl_codegen.core.errors import UnmappedElementError

CARD = {"name": "Card", "content": {"type": "text", "name": "title", "style": {"color": "red"}, "children": "Hi"}}


def test_generate_component_default_target():
  code = generate_component(CARD)
  assert "<span style={{ color: 'red' }}>Hi</span>" in code
  assert code.endswith("export default Card\n")


def test_generate_component_target_override():
  code = generate_component(CARD, target="react.JSS", plugin_settings={"jss_declaration_name": "styles"})
  assert "<span className={classes['title']}>Hi</span>" in code
  assert code.endswith("export default injectSheet(styles)(Card)\n")


def test_generate_component_escapes_markup_in_text():
  code = generate_component({"name": "C", "content": {"type": "text", "children": "a < b"}})
  assert "<span>a &lt; b</span>" in code


def test_generate_component_unmapped():
  with pytest.raises(UnmappedElementError):
    generate_component({"name": "X", "content": {"type": "carousel"}})


def test_version():
  assert uidl_codegen.__version__ == "0.1.0"
