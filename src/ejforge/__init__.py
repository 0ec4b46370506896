"""Scaffolding for ejabberd extension projects.

The package validates application and module names, renders a fixed set of
Mix project templates and writes them to disk. It can be used
programmatically through :class:`ProjectMaterializer` or via the command
line interface.
"""

from __future__ import annotations

from .config import GeneratorSettings
from .errors import GenerationError
from .models import GenerationRequest, GenerationResult, ResolvedParameters
from .naming import camelize, validate_app_name, validate_module_name
from .scaffold import ProjectMaterializer
from .template import TemplateRenderer, TemplateRenderingError
from .variants import ConfigVariant, EntryVariant, select_variants
from .versioning import format_short_version

__all__ = [
    "ConfigVariant",
    "EntryVariant",
    "GenerationError",
    "GenerationRequest",
    "GenerationResult",
    "GeneratorSettings",
    "ProjectMaterializer",
    "ResolvedParameters",
    "TemplateRenderer",
    "TemplateRenderingError",
    "camelize",
    "format_short_version",
    "select_variants",
    "validate_app_name",
    "validate_module_name",
]

__version__ = "0.1.0"
