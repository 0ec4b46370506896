"""Adapters backed by the local Elixir toolchain and the terminal."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Callable, Iterable, TextIO

from ...errors import DependencyFetchError
from ..interfaces import DependencyFetcher, ModuleLookup, Prompt, ToolchainProbe

LOGGER = logging.getLogger(__name__)

KNOWN_MODULES = frozenset(
    {
        "Agent",
        "Application",
        "Code",
        "Ejabberd",
        "Ejabberd.Config",
        "Ejabberd.ConfigFile",
        "Ejabberd.ConfigUtil",
        "Ejabberd.Hooks",
        "Ejabberd.Logger",
        "Ejabberd.Module",
        "Enum",
        "ExUnit",
        "File",
        "GenServer",
        "IO",
        "Kernel",
        "List",
        "Logger",
        "Map",
        "Mix",
        "Module",
        "Path",
        "Process",
        "String",
        "Supervisor",
        "System",
        "Task",
    }
)

# Prints true/false for the alias passed as the first script argument.
_ENSURE_LOADED_SCRIPT = "IO.write Code.ensure_loaded?(Module.concat(Elixir, hd(System.argv)))"


class StaticModuleLookup(ModuleLookup):
    """Check module names against a fixed set of known names."""

    def __init__(self, names: Iterable[str] = KNOWN_MODULES):
        self._names = frozenset(names)

    def exists(self, name: str) -> bool:
        return name in self._names


class ElixirModuleLookup(ModuleLookup):
    """Ask a local ``elixir`` executable whether a module can be loaded.

    When no executable is available, or it fails, the answer comes from
    ``fallback`` instead.
    """

    def __init__(self, executable: str = "elixir", fallback: ModuleLookup | None = None):
        self._executable = executable
        self._fallback = fallback or StaticModuleLookup()

    def exists(self, name: str) -> bool:
        command = shutil.which(self._executable)
        if command is None:
            LOGGER.debug("%s not found, using static module lookup", self._executable)
            return self._fallback.exists(name)

        try:
            result = subprocess.run(
                [command, "-e", _ENSURE_LOADED_SCRIPT, name],
                capture_output=True,
                check=True,
                text=True,
            )
        except (subprocess.CalledProcessError, OSError) as exc:
            LOGGER.warning("module lookup through %s failed: %s", command, exc)
            return self._fallback.exists(name)
        return result.stdout.strip() == "true"


class ConsolePrompt(Prompt):
    """Ask questions on a terminal, re-asking until the answer is yes or no."""

    _YES = {"y", "yes"}
    _NO = {"n", "no"}

    def __init__(
        self,
        reader: Callable[[str], str] = input,
        stream: TextIO | None = None,
    ):
        self._reader = reader
        self._stream = stream

    def confirm(self, question: str) -> bool:
        while True:
            try:
                answer = self._reader(f"{question} [Yn] ").strip().lower()
            except EOFError:
                return False
            if not answer or answer in self._YES:
                return True
            if answer in self._NO:
                return False
            stream = self._stream if self._stream is not None else sys.stdout
            print("Please answer yes or no.", file=stream)


class FixedPrompt(Prompt):
    """Return the same pre-supplied answer to every question."""

    def __init__(self, answer: bool):
        self.answer = answer
        self.questions: list[str] = []

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        return self.answer


class MixDependencyFetcher(DependencyFetcher):
    """Run ``mix deps.get`` inside the generated project."""

    def __init__(self, executable: str = "mix"):
        self._executable = executable

    def fetch(self, project_dir: Path) -> None:
        try:
            subprocess.run([self._executable, "deps.get"], cwd=project_dir, check=True)
        except subprocess.CalledProcessError as exc:
            raise DependencyFetchError(
                f"{self._executable} deps.get exited with status {exc.returncode}"
            ) from exc
        except OSError as exc:
            raise DependencyFetchError(f"could not run {self._executable} deps.get: {exc}") from exc


class FixedToolchainProbe(ToolchainProbe):
    def __init__(self, version: str):
        self._version = version

    def version(self) -> str:
        return self._version


class ElixirToolchainProbe(ToolchainProbe):
    """Read the version of a local ``elixir`` executable.

    ``default`` is returned when the executable is missing or fails.
    """

    def __init__(self, default: str, executable: str = "elixir"):
        self._default = default
        self._executable = executable

    def version(self) -> str:
        command = shutil.which(self._executable)
        if command is None:
            LOGGER.debug("%s not found, assuming version %s", self._executable, self._default)
            return self._default

        try:
            result = subprocess.run(
                [command, "--short-version"],
                capture_output=True,
                check=True,
                text=True,
            )
        except (subprocess.CalledProcessError, OSError) as exc:
            LOGGER.warning("could not read %s version: %s", command, exc)
            return self._default
        return result.stdout.strip() or self._default


__all__ = [
    "ConsolePrompt",
    "ElixirModuleLookup",
    "ElixirToolchainProbe",
    "FixedPrompt",
    "FixedToolchainProbe",
    "KNOWN_MODULES",
    "MixDependencyFetcher",
    "StaticModuleLookup",
]
