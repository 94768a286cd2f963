"""
Dependency Collection.

Only package dependencies belong in a package manifest; local components are
imported by relative path and need no entry.

Known limitation: version conflicts are not reconciled. When two entries name
the same package the last one in iteration order wins; semver ranges are never
merged.
"""

from typing import Dict, Iterable, Mapping, Union

from uidl_codegen.enums import DependencyKind
from uidl_codegen.uidl.schema import DependencyRef

DependencySource = Union[Mapping[str, DependencyRef], Iterable[DependencyRef]]


def collect_packages(dependencies: DependencySource) -> Dict[str, str]:
  """
  Extracts the `{package: version}` manifest fragment.

  Args:
      dependencies: Dependencies keyed by element name, or a plain iterable.

  Returns:
      Dict[str, str]: Package path -> version ('latest' when no version is declared).
  """
  values = dependencies.values() if isinstance(dependencies, Mapping) else dependencies
  packages: Dict[str, str] = {}
  for dep in values:
    if dep.kind != DependencyKind.PACKAGE or not dep.path:
      continue
    packages[dep.path] = dep.version or "latest"
  return packages


def merge_packages(*manifests: Mapping[str, str]) -> Dict[str, str]:
  """Merges manifest fragments left to right; later fragments win."""
  merged: Dict[str, str] = {}
  for manifest in manifests:
    merged.update(manifest)
  return merged
