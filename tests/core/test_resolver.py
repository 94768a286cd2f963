"""
Tests for the Element Resolver.

Verifies:
1. Lookups against the base table and overlay precedence.
2. Unmapped types fail unless a fallback element is configured.
3. Attribute tables parse into binding and literal rules.
"""

import pytest

from uidl_codegen.core.errors import CodegenError, UnmappedElementError
from uidl_codegen.core.resolver import BindingRule, ElementResolver, LiteralRule, MappedElement
from uidl_codegen.enums import DependencyKind


def test_resolves_base_entry(resolver):
  mapped = resolver("container")
  assert isinstance(mapped, MappedElement)
  assert mapped.name == "div"


def test_resolver_is_callable_and_resolve_agree(resolver):
  assert resolver("text") == resolver.resolve("text")


def test_overlay_replaces_entry_by_type():
  res = ElementResolver(
    {"container": {"name": "div"}, "text": {"name": "span"}},
    overlays=[{"container": {"name": "View"}}],
  )
  assert res("container").name == "View"
  assert res("text").name == "span"


def test_last_overlay_wins():
  res = ElementResolver(
    {"container": {"name": "div"}},
    overlays=[{"container": {"name": "section"}}, {"container": {"name": "main"}}],
  )
  assert res("container").name == "main"


def test_unmapped_type_raises(resolver):
  with pytest.raises(UnmappedElementError) as exc:
    resolver("carousel")
  assert exc.value.element_type == "carousel"
  assert isinstance(exc.value, CodegenError)


def test_fallback_used_for_unmapped_type():
  res = ElementResolver({"text": {"name": "span"}}, fallback=MappedElement(name="div"))
  assert res("carousel").name == "div"
  assert res("text").name == "span"


def test_contains_and_element_types(resolver):
  assert "link" in resolver
  assert "carousel" not in resolver
  assert set(resolver.element_types) >= {"container", "text", "link"}


def test_attribute_rules_parsing():
  mapped = MappedElement(name="a", attrs={"href": "$attrs.url", "rel": "noopener", "title": ""})
  rules = mapped.attribute_rules()
  assert rules == [("href", BindingRule("url")), ("rel", LiteralRule("noopener"))]


def test_mapping_dependency_accepts_legacy_type_key(resolver):
  mapped = resolver("navlink")
  assert mapped.dependency is not None
  assert mapped.dependency.kind == DependencyKind.PACKAGE
  assert mapped.dependency.path == "react-router-dom"


def test_mapped_element_is_frozen():
  mapped = MappedElement(name="div")
  with pytest.raises(Exception):
    mapped.name = "span"
