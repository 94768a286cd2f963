"""
Tests for the element mapping loader.
"""

import json
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from uidl_codegen.core.resolver import MappedElement
from uidl_codegen.frameworks import loader


@pytest.fixture(autouse=True)
def clean_cache():
  loader.clear_mapping_cache()
  yield
  loader.clear_mapping_cache()


def test_bundled_tables_load():
  html = loader.load_mapping("html")
  assert html["container"] == MappedElement(name="div")
  assert html["link"].attrs == {"href": "$attrs.url"}
  assert loader.load_mapping("react")["navlink"].dependency.path == "react-router-dom"


def test_bundled_tables_are_cached():
  assert loader.load_mapping("html") is loader.load_mapping("html")


def test_missing_table_is_empty():
  assert loader.load_mapping("does-not-exist") == {}


def test_corrupt_table_is_logged_and_empty(tmp_path, caplog):
  (tmp_path / "broken.json").write_text("{ not json", encoding="utf-8")
  with patch.object(loader, "DEFINITIONS_DIR", tmp_path):
    assert loader.load_mapping("broken") == {}
  assert "broken" in caplog.text


def test_custom_mapping_file(tmp_path):
  path = tmp_path / "custom.json"
  path.write_text(json.dumps({"card": {"name": "Card", "dependency": {"kind": "local"}}}), encoding="utf-8")
  table = loader.load_custom_mapping(path)
  assert table["card"].name == "Card"


def test_invalid_custom_mapping_raises(tmp_path):
  path = tmp_path / "custom.json"
  path.write_text(json.dumps({"card": {"attrs": {}}}), encoding="utf-8")
  with pytest.raises(ValidationError):
    loader.load_custom_mapping(path)
