from .component import handle_component, load_json
from .project import handle_project, write_folder
from .targets import handle_targets

__all__ = [
  "handle_component",
  "handle_project",
  "handle_targets",
  "load_json",
  "write_folder",
]
