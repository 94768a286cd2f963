"""
Tests for the Generator Target registry.

Verifies:
1. Bundled targets are auto-registered and sorted by UI priority.
2. `register_target` adds classes and `get_target` instantiates them.
3. Unknown targets and unregistered plugins fail with codegen errors.
"""

import pytest

from uidl_codegen.core.errors import CodegenError, UnknownTargetError
from uidl_codegen.frameworks import available_targets, get_target
from uidl_codegen.frameworks.base import _TARGET_REGISTRY, GeneratorTarget, register_target


def test_bundled_targets_registered_in_priority_order():
  targets = available_targets()
  assert targets[:2] == ["react.InlineStyles", "react.JSS"]


def test_bundled_plugin_chains():
  assert get_target("react.InlineStyles").plugins == ["react-jsx", "react-inline-styles", "react-component"]
  assert get_target("react.JSS").plugins == ["react-jsx", "react-component", "react-jss"]


def test_register_target_mechanics():
  key = "test.Target"

  @register_target(key)
  class TestTarget(GeneratorTarget):
    display_name = "Test"
    ui_priority = 1
    plugins = ["react-jsx"]

  assert _TARGET_REGISTRY[key] is TestTarget
  assert isinstance(get_target(key), TestTarget)
  assert available_targets()[0] == key


def test_unknown_target():
  with pytest.raises(UnknownTargetError) as exc:
    get_target("angular")
  assert exc.value.target == "angular"


def test_unregistered_plugin_in_chain():
  class BrokenTarget(GeneratorTarget):
    display_name = "Broken"
    plugins = ["missing-plugin"]

  with pytest.raises(CodegenError, match="missing-plugin"):
    BrokenTarget().create_plugins()


def test_create_resolver_layers_tables():
  resolver = get_target("react.InlineStyles").create_resolver(custom_mapping={"text": {"name": "p"}})
  assert resolver("container").name == "div"
  assert resolver("navlink").name == "Link"
  assert resolver("text").name == "p"


def test_create_plugins_passes_settings():
  chain = get_target("react.JSS").create_plugins({"jss_declaration_name": "sheet"})
  assert len(chain) == 3
  assert all(callable(plugin) for plugin in chain)
