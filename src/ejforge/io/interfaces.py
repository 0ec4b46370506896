"""Abstract interfaces for the host services the generator relies on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ModuleLookup(ABC):
    """Answers whether a module name is already defined in the host toolchain."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Return ``True`` when ``name`` resolves to a loaded module."""


class Prompt(ABC):
    """Yes/no questions addressed to the operator."""

    @abstractmethod
    def confirm(self, question: str) -> bool:
        """Ask ``question`` and return the operator's answer."""


class DependencyFetcher(ABC):
    """Runs the external step that downloads a project's dependencies."""

    @abstractmethod
    def fetch(self, project_dir: Path) -> None:
        """Fetch dependencies for the project in ``project_dir``.

        Raises :class:`~ejforge.errors.DependencyFetchError` on failure.
        """


class ToolchainProbe(ABC):
    """Reports the version of the host toolchain."""

    @abstractmethod
    def version(self) -> str:
        """Return the toolchain version as a semantic version string."""


__all__ = ["DependencyFetcher", "ModuleLookup", "Prompt", "ToolchainProbe"]
