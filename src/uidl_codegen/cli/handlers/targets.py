"""CLI handler listing the registered generator targets."""

from rich.table import Table

from uidl_codegen.frameworks import available_targets, get_target
from uidl_codegen.utils.console import console


def handle_targets() -> int:
  """Handles 'targets' command."""
  table = Table(title="Generator Targets")
  table.add_column("Key", style="cyan")
  table.add_column("Name")
  table.add_column("Mappings")
  table.add_column("Plugins", style="magenta")

  for key in available_targets():
    target = get_target(key)
    table.add_row(key, target.display_name, ", ".join(target.mappings), " -> ".join(target.plugins))

  console.print(table)
  return 0
