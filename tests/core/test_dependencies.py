"""Tests for package dependency collection."""

from uidl_codegen.core.dependencies import collect_packages, merge_packages
from uidl_codegen.uidl.schema import DependencyRef


def _dep(**kwargs) -> DependencyRef:
  return DependencyRef.model_validate(kwargs)


def test_only_packages_are_collected():
  deps = {
    "Link": _dep(type="package", path="react-router", version="^5"),
    "Box": _dep(type="local", path="./Box"),
  }
  assert collect_packages(deps) == {"react-router": "^5"}


def test_missing_version_defaults_to_latest():
  assert collect_packages({"X": _dep(kind="package", path="lodash")}) == {"lodash": "latest"}


def test_package_without_path_is_dropped():
  assert collect_packages({"X": _dep(kind="package", version="1.0.0")}) == {}


def test_last_write_wins():
  deps = [
    _dep(kind="package", path="react-router", version="^4"),
    _dep(kind="package", path="react-router", version="^5"),
  ]
  assert collect_packages(deps) == {"react-router": "^5"}


def test_merge_packages_left_to_right():
  merged = merge_packages({"a": "1", "b": "1"}, {"b": "2"}, {})
  assert merged == {"a": "1", "b": "2"}
