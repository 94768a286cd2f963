"""
Main Entry Point for uidl-codegen CLI.

This module handles argument parsing and dispatches to the command handlers
defined in `uidl_codegen.cli.handlers`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from uidl_codegen import __version__
from uidl_codegen.cli import handlers
from uidl_codegen.config import parse_cli_key_values


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="uidl-codegen: UIDL to framework code generator")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: COMPONENT ---
  cmd_comp = subparsers.add_parser("component", help="Generate a single component")
  cmd_comp.add_argument("path", type=Path, help="Component UIDL JSON file")
  cmd_comp.add_argument("--target", default=None, help="Generator target (default: from toml)")
  cmd_comp.add_argument("--out", type=Path, help="Output file (default: stdout)")
  cmd_comp.add_argument(
    "--config",
    nargs="*",
    help="Plugin configuration flags in key=value format (e.g. jss_declaration_name=styles)",
  )

  # --- Command: PROJECT ---
  cmd_proj = subparsers.add_parser("project", help="Generate all pages and components of a project")
  cmd_proj.add_argument("path", type=Path, help="Project UIDL JSON file")
  cmd_proj.add_argument("--out", type=Path, required=True, help="Output directory")
  cmd_proj.add_argument("--target", default=None, help="Generator target (default: from toml)")
  cmd_proj.add_argument("--package-json", type=Path, default=None, help="Base package.json to extend")
  cmd_proj.add_argument("--config", nargs="*", help="Plugin configuration flags in key=value format")

  # --- Command: TARGETS ---
  subparsers.add_parser("targets", help="List the registered generator targets")

  args = parser.parse_args(argv)

  if args.command == "component":
    settings = parse_cli_key_values(args.config)
    return handlers.handle_component(args.path, args.out, args.target, settings)

  elif args.command == "project":
    settings = parse_cli_key_values(args.config)
    return handlers.handle_project(args.path, args.out, args.target, settings, args.package_json)

  elif args.command == "targets":
    return handlers.handle_targets()

  return 1


if __name__ == "__main__":
  sys.exit(main())
