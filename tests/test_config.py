"""
Tests for runtime configuration loading.
"""

import pytest
from pydantic import ValidationError

from uidl_codegen.config import DEFAULT_TARGET, RuntimeConfig, parse_cli_key_values


def test_defaults():
  config = RuntimeConfig()
  assert config.target == DEFAULT_TARGET
  assert config.fallback_element is None
  assert config.effective_plugin_settings == {"local_dependencies_prefix": "./"}


def test_unknown_target_rejected():
  with pytest.raises(ValidationError, match="Unknown target"):
    RuntimeConfig(target="angular")


def test_plugin_settings_win_over_top_level_options():
  config = RuntimeConfig(local_dependencies_prefix="../", plugin_settings={"local_dependencies_prefix": "~/"})
  assert config.effective_plugin_settings["local_dependencies_prefix"] == "~/"


def test_load_from_pyproject(tmp_path):
  (tmp_path / "pyproject.toml").write_text(
    "[tool.uidl_codegen]\n"
    'target = "react.JSS"\n'
    'custom_mapping = "mapping.json"\n'
    'fallback_element = "div"\n'
    'plugin_paths = ["plugins"]\n'
    "\n"
    "[tool.uidl_codegen.plugin_settings]\n"
    'jss_declaration_name = "sheet"\n',
    encoding="utf-8",
  )
  nested = tmp_path / "ui" / "pages"
  nested.mkdir(parents=True)

  config = RuntimeConfig.load(search_path=nested)

  assert config.target == "react.JSS"
  assert config.custom_mapping == (tmp_path / "mapping.json").resolve()
  assert config.fallback_element == "div"
  assert config.plugin_paths == [(tmp_path / "plugins").resolve()]
  assert config.plugin_settings == {"jss_declaration_name": "sheet"}


def test_explicit_arguments_override_file(tmp_path):
  (tmp_path / "pyproject.toml").write_text(
    '[tool.uidl_codegen]\ntarget = "react.JSS"\n\n[tool.uidl_codegen.plugin_settings]\na = 1\nb = 1\n',
    encoding="utf-8",
  )
  config = RuntimeConfig.load(target="react.InlineStyles", plugin_settings={"b": 2}, search_path=tmp_path)

  assert config.target == "react.InlineStyles"
  assert config.plugin_settings == {"a": 1, "b": 2}


def test_unreadable_pyproject_is_ignored(tmp_path, caplog):
  (tmp_path / "pyproject.toml").write_text("[tool.uidl_codegen\n", encoding="utf-8")
  config = RuntimeConfig.load(search_path=tmp_path)
  assert config.target == DEFAULT_TARGET
  assert "Ignoring unreadable" in caplog.text


def test_parse_cli_key_values():
  parsed = parse_cli_key_values(["flag=true", "off=False", "n=3", "ratio=0.5", "name=styles", "broken"])
  assert parsed == {"flag": True, "off": False, "n": 3, "ratio": 0.5, "name": "styles"}
  assert parse_cli_key_values(None) == {}
