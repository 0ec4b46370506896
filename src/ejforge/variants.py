"""Selection between mutually exclusive template variants."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "ConfigVariant",
    "EntryVariant",
    "select_config_variant",
    "select_entry_variant",
    "select_variants",
]


class EntryVariant(str, Enum):
    """Shape of the generated library entry point."""

    PLAIN = "plain"
    SUPERVISED = "supervised"


class ConfigVariant(str, Enum):
    """Format of the generated ejabberd configuration file."""

    STRUCTURED = "structured"
    LEGACY = "legacy"


def select_entry_variant(include_supervisor: bool) -> EntryVariant:
    return EntryVariant.SUPERVISED if include_supervisor else EntryVariant.PLAIN


def select_config_variant(legacy_config_format: bool) -> ConfigVariant:
    return ConfigVariant.LEGACY if legacy_config_format else ConfigVariant.STRUCTURED


def select_variants(
    include_supervisor: bool, legacy_config_format: bool
) -> tuple[EntryVariant, ConfigVariant]:
    """Return the entry and config variants for the given flags."""

    return select_entry_variant(include_supervisor), select_config_variant(legacy_config_format)
