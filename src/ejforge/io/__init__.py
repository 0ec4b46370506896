"""Host service interfaces and adapters for ejforge."""

from .interfaces import DependencyFetcher, ModuleLookup, Prompt, ToolchainProbe

__all__ = [
    "DependencyFetcher",
    "ModuleLookup",
    "Prompt",
    "ToolchainProbe",
]
