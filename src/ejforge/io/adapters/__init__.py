"""Concrete host service adapters."""

from .system import (
    ConsolePrompt,
    ElixirModuleLookup,
    ElixirToolchainProbe,
    FixedPrompt,
    FixedToolchainProbe,
    MixDependencyFetcher,
    StaticModuleLookup,
)

__all__ = [
    "ConsolePrompt",
    "ElixirModuleLookup",
    "ElixirToolchainProbe",
    "FixedPrompt",
    "FixedToolchainProbe",
    "MixDependencyFetcher",
    "StaticModuleLookup",
]
