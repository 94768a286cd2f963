"""
Project Command Handler.

Implements `uidl_codegen project`: generates every page and component of a
project UIDL file and writes the folder tree below the output directory.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError
from rich.table import Table

from uidl_codegen.cli.handlers.component import load_json
from uidl_codegen.config import RuntimeConfig
from uidl_codegen.core.errors import CodegenError
from uidl_codegen.project import Folder, generate_project
from uidl_codegen.uidl.schema import UIDLDocument
from uidl_codegen.utils.console import console, log_error, log_info, log_success, log_warning


def write_folder(folder: Folder, parent: Path) -> int:
  """
  Writes an in-memory folder tree to disk.

  Entries whose path would resolve outside `parent` are skipped with a warning.

  Args:
      folder: Tree to write; `folder.name` becomes a directory below `parent`.
      parent: Existing or creatable base directory.

  Returns:
      int: Number of files written.
  """
  base = parent.resolve()
  root = (base / folder.name).resolve()
  if not root.is_relative_to(base):
    log_warning(f"Skipping folder outside [path]{base}[/path]: {folder.name}")
    return 0

  root.mkdir(parents=True, exist_ok=True)
  count = 0
  for file in folder.files:
    target = (root / file.file_name).resolve()
    if target.parent != root:
      log_warning(f"Skipping file outside [path]{root}[/path]: {file.file_name}")
      continue
    with open(target, "wt", encoding="utf-8") as f:
      f.write(file.content)
    count += 1
  for sub_folder in folder.sub_folders:
    count += write_folder(sub_folder, root)
  return count


def handle_project(
  input_path: Path,
  output_dir: Path,
  target: Optional[str],
  plugin_settings: Dict[str, Any],
  package_json: Optional[Path] = None,
) -> int:
  """
  Handles the 'project' command execution.

  Args:
      input_path: UIDL JSON file with `"schema": "project"`.
      output_dir: Directory receiving the generated `dist` tree.
      target: Override for the generator target.
      plugin_settings: Plugin configuration flags from the command line.
      package_json: Base manifest to extend with the collected dependencies.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    config = RuntimeConfig.load(target=target, plugin_settings=plugin_settings, search_path=input_path.parent)
    document = UIDLDocument.model_validate(load_json(input_path))
    base_manifest = load_json(package_json) if package_json else None
    log_info(f"Generating project from [path]{input_path}[/path] with target '{config.target}'")
    result = asyncio.run(generate_project(document, config=config, source_package_json=base_manifest))
  except json.JSONDecodeError as e:
    log_error(f"Invalid JSON: {e}")
    return 1
  except (CodegenError, ValidationError) as e:
    log_error(f"Failed to generate {input_path}: {e}")
    return 1

  count = write_folder(result.folder, output_dir)
  log_success(f"Wrote {count} files to [path]{output_dir / result.folder.name}[/path]")

  if result.dependencies:
    table = Table(title="Package Dependencies")
    table.add_column("Package", style="cyan")
    table.add_column("Version")
    for name, version in sorted(result.dependencies.items()):
      table.add_row(name, version)
    console.print(table)
  return 0
