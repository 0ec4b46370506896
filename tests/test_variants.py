from __future__ import annotations

import itertools

from ejforge.variants import ConfigVariant, EntryVariant, select_variants


def test_select_variants_maps_flags():
    assert select_variants(False, False) == (EntryVariant.PLAIN, ConfigVariant.STRUCTURED)
    assert select_variants(True, False) == (EntryVariant.SUPERVISED, ConfigVariant.STRUCTURED)
    assert select_variants(False, True) == (EntryVariant.PLAIN, ConfigVariant.LEGACY)
    assert select_variants(True, True) == (EntryVariant.SUPERVISED, ConfigVariant.LEGACY)


def test_select_variants_is_injective():
    results = {select_variants(a, b) for a, b in itertools.product([False, True], repeat=2)}
    assert len(results) == 4
