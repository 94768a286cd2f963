"""
React Targets.

Both targets share the HTML element table overlaid with React specific
elements (router links); they differ in how styles are emitted.
"""

from uidl_codegen.frameworks.base import GeneratorTarget, register_target


@register_target("react.InlineStyles")
class ReactInlineStylesTarget(GeneratorTarget):
  """React functional component with `style={{...}}` attributes."""

  display_name = "React Inline Styles"
  ui_priority = 10
  mappings = ["html", "react"]
  plugins = ["react-jsx", "react-inline-styles", "react-component"]


@register_target("react.JSS")
class ReactJSSTarget(GeneratorTarget):
  """React functional component styled through react-jss class names."""

  display_name = "React JSS"
  ui_priority = 20
  mappings = ["html", "react"]
  plugins = ["react-jsx", "react-component", "react-jss"]
