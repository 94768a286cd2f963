"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Shared resolver / component structure factories.
- Global registry isolation so tests registering custom targets or plugins do not leak.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'uidl_codegen' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

import uidl_codegen.frameworks  # noqa: E402
from uidl_codegen.core import hooks  # noqa: E402
from uidl_codegen.core.resolver import ElementResolver  # noqa: E402
from uidl_codegen.core.structure import ComponentStructure  # noqa: E402
from uidl_codegen.frameworks.base import _TARGET_REGISTRY  # noqa: E402
from uidl_codegen.uidl.schema import ComponentUIDL  # noqa: E402
from uidl_codegen.utils.console import reset_console  # noqa: E402

# Register the bundled plugins so they are part of the baseline restored below.
hooks.load_plugins()

TEST_MAPPING = {
  "container": {"name": "div"},
  "text": {"name": "span"},
  "link": {"name": "a", "attrs": {"href": "$attrs.url"}},
  "button": {"name": "button", "attrs": {"type": "button"}},
  "navlink": {
    "name": "Link",
    "attrs": {"to": "$attrs.url"},
    "dependency": {
      "type": "package",
      "path": "react-router-dom",
      "version": "^5.0.0",
      "importStyle": "named",
    },
  },
}


@pytest.fixture(autouse=True)
def isolate_registries():
  """
  Ensures that targets or plugins registered by a test do not leak
  into other tests.
  """
  original_targets = _TARGET_REGISTRY.copy()
  original_plugins = hooks._PLUGINS.copy()
  yield
  _TARGET_REGISTRY.clear()
  _TARGET_REGISTRY.update(original_targets)
  hooks._PLUGINS.clear()
  hooks._PLUGINS.update(original_plugins)
  reset_console()


@pytest.fixture
def resolver() -> ElementResolver:
  """A small resolver independent of the bundled JSON tables."""
  return ElementResolver(TEST_MAPPING)


@pytest.fixture
def make_structure(resolver):
  """Factory building a fresh `ComponentStructure` from a component dict."""

  def _make(raw: dict) -> ComponentStructure:
    return ComponentStructure(uidl=ComponentUIDL.model_validate(raw), resolver=resolver)

  return _make
