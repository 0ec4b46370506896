"""Generation of ejabberd project skeletons."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Callable, Sequence

from .catalog import render, templates_for
from .config import GeneratorSettings
from .errors import (
    DependencyFetchError,
    DirectoryCreationFailedError,
    FileWriteFailedError,
    GenerationError,
)
from .io.interfaces import DependencyFetcher, ModuleLookup, Prompt, ToolchainProbe
from .models import (
    GenerationRequest,
    GenerationResult,
    MaterializerState,
    RenderedFile,
    ResolvedParameters,
)
from .naming import camelize, infer_app_name, validate_identifiers
from .template import TemplateRenderer
from .variants import select_variants
from .versioning import format_short_version

__all__ = ["PROJECT_DIRECTORIES", "ProjectMaterializer"]


LOGGER = logging.getLogger(__name__)

# Subdirectories in creation order. ``logs`` holds no generated file.
PROJECT_DIRECTORIES = ("config", "lib", "logs", "test")

FETCH_QUESTION = "\nFetch and install dependencies?"

SUCCESS_TEMPLATE = """
Your ejabberd project was created successfully!
Run your application with:

    $ cd {{ path }}
    $ iex -S mix

To add a module to ejabberd, or to change a configuration
parameter, you have to change the configuration file.

You can find the configuration file of ejabberd into
the /config folder.

Visit https://docs.ejabberd.im/ for more informations
"""


class ProjectMaterializer:
    """Validate a :class:`GenerationRequest` and write the project it describes.

    The host services are injected so the whole run can be exercised without
    an Elixir installation or a terminal.
    """

    def __init__(
        self,
        lookup: ModuleLookup,
        prompt: Prompt,
        fetcher: DependencyFetcher,
        toolchain: ToolchainProbe,
        *,
        settings: GeneratorSettings | None = None,
        renderer: TemplateRenderer | None = None,
        echo: Callable[[str], None] = print,
    ) -> None:
        self._lookup = lookup
        self._prompt = prompt
        self._fetcher = fetcher
        self._toolchain = toolchain
        self.settings = settings or GeneratorSettings()
        self.renderer = renderer or TemplateRenderer()
        self._echo = echo
        self._state = MaterializerState.START

    @property
    def state(self) -> MaterializerState:
        """Stage reached by the most recent run."""

        return self._state

    def _transition(self, state: MaterializerState) -> None:
        LOGGER.debug("materializer state %s -> %s", self._state.value, state.value)
        self._state = state

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """Run every stage for ``request`` and return a summary of the run.

        Naming and version errors are raised before anything is written.
        Write errors are raised as soon as they happen and leave the files
        written so far in place.
        """

        self._state = MaterializerState.START
        try:
            self._transition(MaterializerState.VALIDATING)
            app_name, module_name = self.validate(request)
            self._transition(MaterializerState.RESOLVING)
            parameters = self.resolve(request, app_name, module_name)

            self._transition(MaterializerState.RENDERING)
            files = self.render_files(parameters)

            self._transition(MaterializerState.WRITING)
            root = Path(request.path).expanduser()
            written, skipped = self.write(root, files, force=request.force)
        except GenerationError:
            self._transition(MaterializerState.FAILED)
            raise

        self._transition(MaterializerState.DONE)
        fetched, fetch_error = self._fetch_dependencies(root, request.fetch_dependencies)
        self._echo(self.renderer.render_string(SUCCESS_TEMPLATE, {"path": request.path}))

        return GenerationResult(
            state=self._state,
            root=str(root),
            parameters=parameters,
            written=tuple(written),
            skipped=tuple(skipped),
            dependencies_fetched=fetched,
            fetch_error=fetch_error,
        )

    def validate(self, request: GenerationRequest) -> tuple[str, str]:
        """Return the application and module names for ``request``.

        Names missing from the request are derived, the application name from
        the target path and the module name from the application name.
        """

        explicit_app = request.app_name is not None
        app_name = request.app_name if explicit_app else infer_app_name(request.path)
        module_name = (
            request.module_name if request.module_name is not None else camelize(app_name)
        )
        validate_identifiers(app_name, module_name, self._lookup, explicit_app=explicit_app)
        return app_name, module_name

    def resolve(
        self, request: GenerationRequest, app_name: str, module_name: str
    ) -> ResolvedParameters:
        return ResolvedParameters(
            app_name=app_name,
            module_name=module_name,
            include_supervisor=request.include_supervisor,
            legacy_config_format=request.legacy_config_format,
            short_version=format_short_version(self._toolchain.version()),
            dependency_version=self.settings.ejabberd_version,
        )

    def render_files(self, parameters: ResolvedParameters) -> list[RenderedFile]:
        entry, config = select_variants(
            parameters.include_supervisor, parameters.legacy_config_format
        )
        LOGGER.debug("selected %s entry and %s config", entry.value, config.value)
        return [
            render(descriptor, parameters, self.renderer)
            for descriptor in templates_for(entry, config)
        ]

    def write(
        self, root: Path, files: Sequence[RenderedFile], *, force: bool = False
    ) -> tuple[list[str], list[str]]:
        """Write ``files`` below ``root`` and return the written and skipped paths."""

        self._create_directory(root, str(root))
        written: list[str] = []
        skipped: list[str] = []
        remaining = list(PROJECT_DIRECTORIES)

        for rendered in files:
            parent = PurePosixPath(rendered.relative_path).parent.as_posix()
            if parent in remaining:
                position = remaining.index(parent) + 1
                for directory in remaining[:position]:
                    self._create_directory(root / directory, directory)
                del remaining[:position]

            if self._write_file(root, rendered, force=force):
                written.append(rendered.relative_path)
            else:
                skipped.append(rendered.relative_path)

        for directory in remaining:
            self._create_directory(root / directory, directory)

        return written, skipped

    def _create_directory(self, path: Path, display: str) -> None:
        if path.exists() and not path.is_dir():
            raise DirectoryCreationFailedError(f"{path} exists and is not a directory")
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationFailedError(f"could not create directory {path}: {exc}") from exc
        self._echo(f"* creating {display}")

    def _write_file(self, root: Path, rendered: RenderedFile, *, force: bool) -> bool:
        destination = root / rendered.relative_path
        data = rendered.content.encode("utf-8")

        if destination.is_file():
            if destination.read_bytes() == data:
                self._echo(f"* identical {rendered.relative_path}")
                return False
            question = f"{rendered.relative_path} already exists, overwrite?"
            if not force and not self._prompt.confirm(question):
                self._echo(f"* skipping {rendered.relative_path}")
                return False

        try:
            destination.write_bytes(data)
        except OSError as exc:
            raise FileWriteFailedError(f"could not write {destination}: {exc}") from exc

        LOGGER.debug("wrote %d bytes to %s", len(data), destination)
        self._echo(f"* creating {rendered.relative_path}")
        return True

    def _fetch_dependencies(self, root: Path, answer: bool | None) -> tuple[bool, str | None]:
        install = answer if answer is not None else self._prompt.confirm(FETCH_QUESTION)
        if not install:
            return False, None

        self._echo("* info Running mix deps.get")
        try:
            self._fetcher.fetch(root)
        except DependencyFetchError as exc:
            LOGGER.warning("dependency fetch failed for %s: %s", root, exc)
            self._echo(f"* error {exc}")
            return False, str(exc)
        return True, None
