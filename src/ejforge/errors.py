"""Exception types raised while generating a project."""

from __future__ import annotations

__all__ = [
    "DependencyFetchError",
    "DirectoryCreationFailedError",
    "FileWriteFailedError",
    "GenerationError",
    "InvalidAppNameError",
    "InvalidModuleNameError",
    "ModuleNameTakenError",
    "UnparseableVersionError",
]


class GenerationError(RuntimeError):
    """Raised when a project cannot be generated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidAppNameError(GenerationError):
    """The application name does not follow the naming rules."""


class InvalidModuleNameError(GenerationError):
    """The module name is not a valid dot-separated alias."""


class ModuleNameTakenError(GenerationError):
    """The module name already exists in the host toolchain."""


class UnparseableVersionError(GenerationError):
    """A version string is not valid semantic version syntax."""


class DirectoryCreationFailedError(GenerationError):
    """The project directory, or one of its subdirectories, could not be created."""


class FileWriteFailedError(GenerationError):
    """A rendered file could not be written to disk."""


class DependencyFetchError(GenerationError):
    """The external dependency fetch step failed.

    The generated project stays valid when this happens, so the materializer
    reports it instead of propagating it.
    """
