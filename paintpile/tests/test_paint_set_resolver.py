"""Unit tests for paint_set_resolver.py — three-tier paint-name resolution."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import pytest

from paintpile.services.catalog import Paint, _builtin_catalog
from paintpile.services.paint_set_resolver import (
    ResolvedPaintSet,
    get_paint_set_coverage,
    resolve_paint_set,
    resolve_paint_sets,
)
from paintpile.services.paint_sets import PaintSet, get_paint_set_by_id


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────

def make_set(brand: str, names: list[str], set_id: str = "test-set") -> PaintSet:
    return PaintSet(
        set_id=set_id,
        set_name=f"{brand} Test Set",
        brand=brand,
        paint_names=names,
        paint_count=len(names),
    )


def make_catalog() -> list[Paint]:
    return [
        Paint(id="c1", brand="Citadel", name="Abaddon Black", hex_color="#000000"),
        Paint(id="c2", brand="Citadel", name="Mephiston Red", hex_color="#9a1115"),
        Paint(id="a1", brand="The Army Painter", name="Goblin Green", hex_color="#3c7a2e"),
        Paint(id="a2", brand="The Army Painter", name="Holy White 2.0", hex_color="#f2f2f0"),
        Paint(id="v1", brand="Vallejo Game Color", name="Goblin Green", hex_color="#3f8a3a"),
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Tests: resolution tiers
# ─────────────────────────────────────────────────────────────────────────────

class TestResolveTiers:
    def test_exact_brand_and_name(self):
        result = resolve_paint_set(make_set("Citadel", ["Abaddon Black"]), make_catalog())
        assert [p.id for p in result.matched_paints] == ["c1"]
        assert result.unmatched_names == []
        assert result.match_rate == 100

    def test_exact_match_is_case_and_punctuation_blind(self):
        result = resolve_paint_set(make_set("citadel", ["abaddon-black"]), make_catalog())
        assert [p.id for p in result.matched_paints] == ["c1"]

    def test_composite_beats_name_index(self):
        # Name index holds the Army Painter Goblin Green (first in catalog)
        result = resolve_paint_set(make_set("Vallejo Game Color", ["Goblin Green"]), make_catalog())
        assert [p.id for p in result.matched_paints] == ["v1"]

    def test_name_only_with_equivalent_brand(self):
        result = resolve_paint_set(make_set("Games Workshop", ["Mephiston Red"]), make_catalog())
        assert [p.id for p in result.matched_paints] == ["c2"]

    def test_name_only_rejected_for_other_brand(self):
        catalog = [Paint(id="c1", brand="Citadel", name="Abaddon Black", hex_color="#000000")]
        result = resolve_paint_set(make_set("Scale75", ["Abaddon Black"]), catalog)
        assert result.matched_paints == []
        assert result.unmatched_names == ["Abaddon Black"]

    def test_fuzzy_catalog_name_longer(self):
        result = resolve_paint_set(make_set("Army Painter", ["Holy White"]), make_catalog())
        assert [p.id for p in result.matched_paints] == ["a2"]

    def test_fuzzy_set_name_longer(self):
        result = resolve_paint_set(make_set("Citadel", ["Abaddon Black Base"]), make_catalog())
        assert [p.id for p in result.matched_paints] == ["c1"]

    def test_fuzzy_stays_within_brand(self):
        result = resolve_paint_set(make_set("Reaper", ["Holy White"]), make_catalog())
        assert result.unmatched_names == ["Holy White"]


# ─────────────────────────────────────────────────────────────────────────────
# Tests: match rate and edge cases
# ─────────────────────────────────────────────────────────────────────────────

class TestResolveResult:
    def test_partial_match_rate(self):
        result = resolve_paint_set(make_set("Citadel", ["Abaddon Black", "Nonexistent Paint"]), make_catalog())
        assert len(result.matched_paints) == 1
        assert result.unmatched_names == ["Nonexistent Paint"]
        assert result.match_rate == 50

    def test_unmatched_keeps_original_spelling(self):
        result = resolve_paint_set(make_set("Citadel", ["  Weird-Name #7 "]), make_catalog())
        assert result.unmatched_names == ["  Weird-Name #7 "]

    def test_matched_follows_name_order(self):
        result = resolve_paint_set(make_set("Citadel", ["Mephiston Red", "Abaddon Black"]), make_catalog())
        assert [p.id for p in result.matched_paints] == ["c2", "c1"]

    def test_duplicate_names_each_counted(self):
        result = resolve_paint_set(make_set("Citadel", ["Abaddon Black", "Abaddon Black"]), make_catalog())
        assert [p.id for p in result.matched_paints] == ["c1", "c1"]
        assert result.match_rate == 100

    def test_empty_catalog(self):
        result = resolve_paint_set(make_set("X", ["Y"]), [])
        assert result.matched_paints == []
        assert result.unmatched_names == ["Y"]
        assert result.match_rate == 0

    def test_no_names(self):
        result = resolve_paint_set(make_set("Citadel", []), make_catalog())
        assert result.match_rate == 0
        assert result.matched_paints == [] and result.unmatched_names == []

    def test_blank_name_unmatched(self):
        result = resolve_paint_set(make_set("Citadel", ["---"]), make_catalog())
        assert result.unmatched_names == ["---"]

    def test_catalog_not_list(self):
        with pytest.raises(TypeError):
            resolve_paint_set(make_set("Citadel", ["Abaddon Black"]), None)

    def test_set_is_carried_through(self):
        paint_set = make_set("Citadel", ["Abaddon Black"])
        result = resolve_paint_set(paint_set, make_catalog())
        assert isinstance(result, ResolvedPaintSet)
        assert result.set is paint_set

    def test_to_dict_shape(self):
        d = resolve_paint_set(make_set("Citadel", ["Abaddon Black", "Nope"]), make_catalog()).to_dict()
        assert set(d) == {"set", "matchedPaints", "unmatchedNames", "matchRate"}
        assert d["matchedPaints"][0]["name"] == "Abaddon Black"
        assert d["unmatchedNames"] == ["Nope"]
        assert d["matchRate"] == 50


class TestCuratedSetsAgainstBuiltinCatalog:
    @pytest.mark.parametrize("set_id", ["citadel-base-paint-set", "army-painter-speedpaint-starter"])
    def test_fully_resolved(self, set_id):
        result = resolve_paint_set(get_paint_set_by_id(set_id), _builtin_catalog())
        assert result.unmatched_names == []
        assert result.match_rate == 100


# ─────────────────────────────────────────────────────────────────────────────
# Tests: batch + coverage
# ─────────────────────────────────────────────────────────────────────────────

class TestBatchAndCoverage:
    def test_resolve_many(self):
        sets = [make_set("Citadel", ["Abaddon Black"], "a"), make_set("Citadel", ["Nope"], "b")]
        results = resolve_paint_sets(sets, make_catalog())
        assert [r.match_rate for r in results] == [100, 0]

    def test_coverage(self):
        sets = [
            make_set("Citadel", ["Abaddon Black", "Nope"], "a"),
            make_set("Citadel", ["Mephiston Red"], "b"),
            make_set("Army Painter", ["Holy White"], "c"),
        ]
        coverage = get_paint_set_coverage(sets, make_catalog())
        assert coverage["totalSets"] == 3
        assert coverage["totalPaintsInSets"] == 4
        assert coverage["averageMatchRate"] == pytest.approx((50 + 100 + 100) / 3)
        assert coverage["setsByBrand"] == {"Citadel": 2, "Army Painter": 1}

    def test_coverage_no_sets(self):
        coverage = get_paint_set_coverage([], make_catalog())
        assert coverage["totalSets"] == 0
        assert coverage["averageMatchRate"] == 0
