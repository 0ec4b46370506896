"""Immutable records passed between the generation stages."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "GenerationRequest",
    "GenerationResult",
    "MaterializerState",
    "RenderedFile",
    "ResolvedParameters",
    "TemplateDescriptor",
]


class MaterializerState(str, Enum):
    """Stages a generation run moves through."""

    START = "start"
    VALIDATING = "validating"
    FAILED = "failed"
    RESOLVING = "resolving"
    RENDERING = "rendering"
    WRITING = "writing"
    DONE = "done"


class GenerationRequest(BaseModel):
    """Operator input for a single generation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., min_length=1, description="Target directory of the new project.")
    app_name: str | None = Field(None, description="Explicit application name, if given with --app.")
    module_name: str | None = Field(None, description="Explicit module name, if given with --module.")
    include_supervisor: bool = Field(False, description="Generate a supervised application skeleton.")
    legacy_config_format: bool = Field(False, description="Use the legacy YAML ejabberd configuration.")
    force: bool = Field(False, description="Overwrite existing files without asking.")
    fetch_dependencies: bool | None = Field(
        None, description="Fetch dependencies after generation; ask the operator when unset."
    )


class ResolvedParameters(BaseModel):
    """Validated values every template is rendered with."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    app_name: str = Field(..., pattern=r"^[a-z][a-z0-9_]*$")
    module_name: str = Field(..., pattern=r"^[A-Z][A-Za-z0-9_]*(\.[A-Z][A-Za-z0-9_]*)*$")
    include_supervisor: bool = False
    legacy_config_format: bool = False
    short_version: str = Field(..., description="Short form of the host toolchain version.")
    dependency_version: str = Field(..., description="ejabberd version required by the project.")


class TemplateDescriptor(BaseModel):
    """A named template and the relative path it renders to."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    output_path: str = Field(..., description="Relative output path, may contain placeholders.")
    body: str


class RenderedFile(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    relative_path: str
    content: str


class GenerationResult(BaseModel):
    """Outcome of a finished generation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    state: MaterializerState
    root: str
    parameters: ResolvedParameters
    written: Tuple[str, ...] = ()
    skipped: Tuple[str, ...] = ()
    dependencies_fetched: bool = False
    fetch_error: str | None = None
