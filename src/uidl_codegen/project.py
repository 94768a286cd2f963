"""
Project Generation.

Generates every page and reusable component of a `project` UIDL document and
lays the results out as an in-memory folder tree::

    dist/
      package.json        (only when a base manifest is given)
      src/
        components/<Name>.js
        pages/<file-name>.js

Pages import the project's components from `../components/`, components import
each other from `./`. Components are generated concurrently; every one gets its
own `ComponentStructure`, only the resolver is shared.

Writing the tree to disk is left to the caller (see the CLI).
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from uidl_codegen.config import RuntimeConfig
from uidl_codegen.core.dependencies import merge_packages
from uidl_codegen.core.errors import InvalidDocumentError
from uidl_codegen.core.generator import ComponentResult, create_component_generator
from uidl_codegen.enums import DependencyKind, DocumentSchema
from uidl_codegen.uidl.schema import PageState, StateDefinition, UIDLDocument

logger = logging.getLogger(__name__)

PAGES_LOCAL_PREFIX = "../components/"


class File(BaseModel):
  """A generated file."""

  name: str = Field(description="File name without extension.")
  extension: str = Field(".js", description="Extension including the dot.")
  content: str = ""

  @property
  def file_name(self) -> str:
    return f"{self.name}{self.extension}"


class Folder(BaseModel):
  """A directory of generated files."""

  name: str
  files: List[File] = Field(default_factory=list)
  sub_folders: List["Folder"] = Field(default_factory=list)

  def get_folder(self, name: str) -> Optional["Folder"]:
    """Returns the direct sub folder called `name`, if any."""
    for folder in self.sub_folders:
      if folder.name == name:
        return folder
    return None


class PageMetadata(BaseModel):
  """Where a page lives and how it is named."""

  file_name: str
  component_name: str
  path: str


class ProjectResult(BaseModel):
  """
  Output of a project generation.

  Attributes:
      folder: Root of the generated tree.
      dependencies: Merged `{package: version}` map of all files.
  """

  folder: Folder
  dependencies: Dict[str, str] = Field(default_factory=dict)


def compute_file_name(state_key: str, state: PageState) -> str:
  """
  File name of a page: the default page is `index`, others use their url.

  The url is reduced to a plain name: empty, `.` and `..` segments are dropped
  and the rest joined with dashes (`/blog/post` -> `blog-post`).

  Args:
      state_key: Key of the page in the root component's states.
      state: The page definition.

  Returns:
      str: The file name, falling back to `state_key` when no usable url is set.
  """
  if state.default:
    return "index"
  url = state.meta.url if state.meta is not None else None
  segments = [s for s in (url or "").replace("\\", "/").split("/") if s not in ("", ".", "..")]
  if not segments:
    logger.warning(f'State node "{state_key}" did not specify any meta url attribute. Assuming filename: "{state_key}"')
    return state_key
  return "-".join(segments)


def extract_page_metadata(
  router: StateDefinition,
  state_name: str,
  use_path_as_file_name: bool = False,
  convert_default_to_index: bool = False,
) -> PageMetadata:
  """
  Derives file name, component name and route path of a page.

  Args:
      router: Router state definition listing the pages.
      state_name: Value of the page in the router definition.
      use_path_as_file_name: Name files after their route path (file based routers).
      convert_default_to_index: Name the default page `index`.

  Returns:
      PageMetadata: Values from the page meta, defaulting to the state name.
  """
  is_default = convert_default_to_index and state_name == router.default_value
  definition = next((v for v in router.values if v.value == state_name), None)

  if definition is None or definition.meta is None:
    return PageMetadata(
      file_name="index" if is_default else state_name,
      component_name=state_name,
      path=f"/{state_name}",
    )

  meta = definition.meta
  if use_path_as_file_name:
    file_name_from_meta = meta.path[1:] if meta.path else None
  else:
    file_name_from_meta = meta.file_name

  return PageMetadata(
    file_name="index" if is_default else (file_name_from_meta or state_name),
    component_name=meta.component_name or state_name,
    path=meta.path or f"/{state_name}",
  )


def _component_mapping(document: UIDLDocument) -> Dict[str, Any]:
  """Maps every project component name onto itself as a local element."""
  return {
    name: {"name": component.name, "dependency": {"kind": DependencyKind.LOCAL.value}}
    for name, component in document.components.items()
  }


async def generate_project(
  document: UIDLDocument,
  config: Optional[RuntimeConfig] = None,
  dist_path: str = "dist",
  source_package_json: Optional[Dict[str, Any]] = None,
) -> ProjectResult:
  """
  Generates all pages and components of a project document.

  Args:
      document: A document with `schema == "project"`.
      config: Runtime configuration (target, custom mapping...).
      dist_path: Name of the root folder.
      source_package_json: Base manifest. When given, a `package.json` with
          the collected dependencies merged in is added to the root folder.

  Returns:
      ProjectResult: The folder tree and the merged package map.

  Raises:
      InvalidDocumentError: If the document is not a project or has no root.
      CodegenError: If any component fails to generate.
  """
  if document.document_schema != DocumentSchema.PROJECT:
    raise InvalidDocumentError(f"Expected a '{DocumentSchema.PROJECT.value}' document, got '{document.document_schema.value}'.")
  if document.root is None:
    raise InvalidDocumentError("Project document has no 'root' component.")

  config = config or RuntimeConfig()
  mapping = _component_mapping(document)
  page_generator = create_component_generator(
    config, plugin_settings={"local_dependencies_prefix": PAGES_LOCAL_PREFIX}, extra_mapping=mapping
  )
  component_generator = create_component_generator(config, extra_mapping=mapping)

  pages = list(document.root.states.items())
  components = list(document.components.values())
  logger.debug(f"Generating {len(pages)} pages and {len(components)} components")

  results: List[ComponentResult] = await asyncio.gather(
    *(page_generator.generate(state.component) for _, state in pages),
    *(component_generator.generate(component) for component in components),
  )
  page_results, component_results = results[: len(pages)], results[len(pages) :]

  extension = page_generator.file_extension
  pages_folder = Folder(
    name="pages",
    files=[
      File(name=compute_file_name(key, state), extension=extension, content=result.code)
      for (key, state), result in zip(pages, page_results)
    ],
  )
  components_folder = Folder(
    name="components",
    files=[File(name=result.name, extension=extension, content=result.code) for result in component_results],
  )
  dist_folder = Folder(
    name=dist_path,
    sub_folders=[Folder(name="src", sub_folders=[components_folder, pages_folder])],
  )

  dependencies = merge_packages(*(result.packages for result in results))

  if source_package_json is not None:
    manifest = dict(source_package_json)
    manifest["dependencies"] = {**manifest.get("dependencies", {}), **dependencies}
    dist_folder.files.append(File(name="package", extension=".json", content=json.dumps(manifest, indent=2)))

  return ProjectResult(folder=dist_folder, dependencies=dependencies)
