"""
Reserved-Sigil References.

UIDL values starting with `$` are references rather than literals:

- `$props.<name>` binds to a component input (rendered as a dynamic expression).
- `$attrs.<key>` is used by element mappings to alias a UIDL attribute under
  another target attribute name.
"""

from dataclasses import dataclass
from typing import Any, Optional

SIGIL = "$"
PROPS_PREFIX = "$props."
ATTRS_PREFIX = "$attrs."


@dataclass(frozen=True)
class Reference:
  """A parsed reference value."""

  scope: str
  """'props' or 'attrs' (or any other scope following the sigil)."""

  name: str
  """The unprefixed reference name."""


def is_reference(value: Any) -> bool:
  """True if the value is a string using the reserved sigil."""
  return isinstance(value, str) and value.startswith(SIGIL)


def parse_reference(value: Any) -> Optional[Reference]:
  """
  Splits a `$scope.name` string into a `Reference`.

  Args:
      value: Any UIDL value.

  Returns:
      Optional[Reference]: None if the value is not a well-formed reference.
  """
  if not is_reference(value) or "." not in value:
    return None
  scope, name = value[len(SIGIL) :].split(".", 1)
  if not scope or not name:
    return None
  return Reference(scope=scope, name=name)


def props_reference(value: Any) -> Optional[str]:
  """Returns the bound input name for `$props.x` values, else None."""
  ref = parse_reference(value)
  if ref and ref.scope == "props":
    return ref.name
  return None


def attrs_reference(value: Any) -> Optional[str]:
  """Returns the aliased UIDL attribute key for `$attrs.x` values, else None."""
  ref = parse_reference(value)
  if ref and ref.scope == "attrs":
    return ref.name
  return None
