"""Application and module identifier rules."""

from __future__ import annotations

import re
from pathlib import Path

from .errors import InvalidAppNameError, InvalidModuleNameError, ModuleNameTakenError
from .io.interfaces import ModuleLookup

__all__ = [
    "APP_NAME_PATTERN",
    "MODULE_NAME_PATTERN",
    "camelize",
    "check_module_availability",
    "infer_app_name",
    "is_valid_app_name",
    "is_valid_module_name",
    "validate_app_name",
    "validate_identifiers",
    "validate_module_name",
]


APP_NAME_PATTERN = re.compile(r"[a-z][a-z0-9_]*")
MODULE_NAME_PATTERN = re.compile(r"[A-Z][A-Za-z0-9_]*(?:\.[A-Z][A-Za-z0-9_]*)*")


def is_valid_app_name(name: str) -> bool:
    """Return ``True`` when ``name`` is a lowercase application identifier."""

    return isinstance(name, str) and APP_NAME_PATTERN.fullmatch(name) is not None


def is_valid_module_name(name: str) -> bool:
    """Return ``True`` when ``name`` is a dot-separated, capitalised alias."""

    return isinstance(name, str) and MODULE_NAME_PATTERN.fullmatch(name) is not None


def validate_app_name(name: str, explicit: bool) -> None:
    """Raise :class:`InvalidAppNameError` unless ``name`` is a valid app name.

    Parameters
    ----------
    name:
        The candidate application name.
    explicit:
        Whether the operator passed the name with ``--app``. When the name was
        inferred from the target path the message also points at that option.
    """

    if is_valid_app_name(name):
        return

    message = (
        "Application name must start with a letter and have only lowercase "
        f"letters, numbers and underscore, got: {name!r}"
    )
    if not explicit:
        message += (
            ". The application name is inferred from the path, if you'd like to "
            'explicitly name the application then use the "--app APP" option.'
        )
    raise InvalidAppNameError(message)


def validate_module_name(name: str) -> None:
    """Raise :class:`InvalidModuleNameError` unless ``name`` is a valid alias."""

    if not is_valid_module_name(name):
        raise InvalidModuleNameError(
            f"Module name must be a valid Elixir alias (for example: Foo.Bar), got: {name!r}"
        )


def check_module_availability(name: str, lookup: ModuleLookup) -> None:
    """Raise :class:`ModuleNameTakenError` when ``lookup`` already knows ``name``."""

    if lookup.exists(name):
        raise ModuleNameTakenError(
            f"Module name {name} is already taken, please choose another name"
        )


def validate_identifiers(
    app_name: str,
    module_name: str,
    lookup: ModuleLookup,
    *,
    explicit_app: bool,
) -> None:
    """Run every identifier check, stopping at the first failure.

    Syntax is always checked before the lookup so an invalid module name never
    reaches the host toolchain.
    """

    validate_app_name(app_name, explicit_app)
    validate_module_name(module_name)
    check_module_availability(module_name, lookup)


def camelize(name: str) -> str:
    """Return the module alias derived from an application name.

    ``my_app`` becomes ``MyApp`` and ``myapp`` becomes ``Myapp``.
    """

    return "".join(segment[:1].upper() + segment[1:] for segment in name.split("_"))


def infer_app_name(path: str | Path) -> str:
    """Return the application name implied by the basename of ``path``."""

    return Path(path).expanduser().resolve().name
