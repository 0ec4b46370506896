"""Settings shared by the project materializer and CLI."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping

__all__ = ["DEFAULT_EJABBERD_VERSION", "DEFAULT_ELIXIR_VERSION", "GeneratorSettings"]


DEFAULT_EJABBERD_VERSION = "16.4.1"
DEFAULT_ELIXIR_VERSION = "1.2.0"

_ENV_FIELDS = {
    "EJFORGE_EJABBERD_VERSION": "ejabberd_version",
    "EJFORGE_ELIXIR_VERSION": "default_elixir_version",
    "EJFORGE_ELIXIR": "elixir_executable",
    "EJFORGE_MIX": "mix_executable",
}


@dataclass(slots=True, frozen=True)
class GeneratorSettings:
    """Values the generator does not derive from the operator's input.

    Attributes
    ----------
    ejabberd_version:
        The ejabberd release the generated ``mix.exs`` depends on.
    default_elixir_version:
        The Elixir version assumed when the local toolchain cannot be queried.
    elixir_executable:
        Name or path of the ``elixir`` executable used for module lookups and
        version detection.
    mix_executable:
        Name or path of the ``mix`` executable used to fetch dependencies.
    """

    ejabberd_version: str = DEFAULT_EJABBERD_VERSION
    default_elixir_version: str = DEFAULT_ELIXIR_VERSION
    elixir_executable: str = "elixir"
    mix_executable: str = "mix"

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "GeneratorSettings":
        """Build settings from ``EJFORGE_*`` variables in ``env``.

        Unset or blank variables keep their default value.
        """

        overrides = {
            field_name: env[variable].strip()
            for variable, field_name in _ENV_FIELDS.items()
            if env.get(variable, "").strip()
        }
        return replace(cls(), **overrides)
