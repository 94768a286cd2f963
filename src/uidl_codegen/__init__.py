"""
uidl-codegen Package.

Generates framework source code (React with inline styles or react-jss) from
UIDL, a framework-agnostic JSON description of user interfaces.

Usage
-----

Single Component
^^^^^^^^^^^^^^^^

.. code-block:: python

    import uidl_codegen as ucg

    uidl = {
        "name": "Hello",
        "content": {"type": "text", "name": "greeting", "children": "$props.title"},
    }
    print(ucg.generate_component(uidl, target="react.JSS"))

Whole Project
^^^^^^^^^^^^^

.. code-block:: python

    import asyncio
    from uidl_codegen import RuntimeConfig, UIDLDocument, generate_project

    document = UIDLDocument.model_validate(raw_json)
    result = asyncio.run(generate_project(document, RuntimeConfig(target="react.InlineStyles")))
    print(result.dependencies)
"""

import asyncio
from typing import Any, Dict, Mapping, Optional, Union

from uidl_codegen.config import RuntimeConfig
from uidl_codegen.core.generator import ComponentResult, create_component_generator
from uidl_codegen.project import generate_project
from uidl_codegen.uidl.schema import ComponentUIDL, UIDLDocument

__version__ = "0.1.0"


def generate_component(
  uidl: Union[ComponentUIDL, Mapping[str, Any]],
  target: Optional[str] = None,
  plugin_settings: Optional[Dict[str, Any]] = None,
  config: Optional[RuntimeConfig] = None,
) -> str:
  """
  Generates the source code of one component.

  This is a synchronous convenience wrapper around `ComponentGenerator`. Use
  the generator directly (and await it) inside a running event loop.

  Args:
      uidl (ComponentUIDL | dict): The component, as a model or parsed JSON.
      target (str, optional): Target key (e.g. "react.JSS"). Overrides `config.target`.
      plugin_settings (dict, optional): Settings passed to the plugin factories
          (e.g. `{"jss_declaration_name": "styles"}`).
      config (RuntimeConfig, optional): Full configuration. Defaults are used when None.

  Returns:
      str: The generated source code.

  Raises:
      CodegenError: If an element is unmapped or chunk constraints are invalid.
  """
  component = uidl if isinstance(uidl, ComponentUIDL) else ComponentUIDL.model_validate(uidl)

  config = config or RuntimeConfig()
  if target:
    config = RuntimeConfig(**{**config.model_dump(), "target": target})

  generator = create_component_generator(config, plugin_settings=plugin_settings)
  result: ComponentResult = asyncio.run(generator.generate(component))
  return result.code


__all__ = [
  "ComponentResult",
  "RuntimeConfig",
  "UIDLDocument",
  "generate_component",
  "generate_project",
  "__version__",
]
