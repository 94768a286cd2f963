"""
Component Command Handler.

Implements `uidl_codegen component`: reads one component UIDL file, runs the
configured target's generator and prints or writes the resulting source.

The input may be a `component` document (`{"schema": "component", ...}`) or a
bare component (`{"name": ..., "content": ...}`).
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from uidl_codegen.config import RuntimeConfig
from uidl_codegen.core.errors import CodegenError
from uidl_codegen.core.generator import create_component_generator
from uidl_codegen.uidl.schema import ComponentUIDL, UIDLDocument
from uidl_codegen.utils.console import log_error, log_info, log_success


def load_json(path: Path) -> Dict[str, Any]:
  """Reads a JSON file into a dict."""
  with open(path, "rt", encoding="utf-8") as f:
    return json.load(f)


def _to_component(raw: Dict[str, Any]) -> ComponentUIDL:
  if "schema" in raw:
    return UIDLDocument.model_validate(raw).as_component()
  return ComponentUIDL.model_validate(raw)


def handle_component(
  input_path: Path,
  output_path: Optional[Path],
  target: Optional[str],
  plugin_settings: Dict[str, Any],
) -> int:
  """
  Handles the 'component' command execution.

  Args:
      input_path: UIDL JSON file of the component.
      output_path: Destination file. The code is printed when None.
      target: Override for the generator target (e.g. 'react.JSS').
      plugin_settings: Plugin configuration flags from the command line.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    config = RuntimeConfig.load(target=target, plugin_settings=plugin_settings, search_path=input_path.parent)
    component = _to_component(load_json(input_path))
    generator = create_component_generator(config)
    result = asyncio.run(generator.generate(component))
  except json.JSONDecodeError as e:
    log_error(f"Invalid JSON in {input_path}: {e}")
    return 1
  except (CodegenError, ValidationError, ValueError) as e:
    log_error(f"Failed to generate {input_path}: {e}")
    return 1

  if output_path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wt", encoding="utf-8") as f:
      f.write(result.code)
    log_success(f"Generated [chunk]{component.name}[/chunk]: [path]{input_path}[/path] -> [path]{output_path}[/path]")
    if result.packages:
      log_info(f"Package dependencies: {result.packages}")
  else:
    # stdout carries only the code
    print(result.code, end="")
  return 0
