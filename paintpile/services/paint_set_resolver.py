"""
Paint Set Resolver — maps the paint names of a PaintSet onto catalog paints.

Each name is tried against three tiers, first hit wins:
  1. exact brand + name
  2. name only, accepted when the found paint's brand matches the set brand
  3. substring match (either direction) among catalog paints of the set brand

Names that fail all three are reported as unmatched; nothing is raised for
a miss.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from .brands import brands_match, normalize
from .catalog import Paint
from .paint_sets import PaintSet

logger = logging.getLogger(__name__)


@dataclass
class ResolvedPaintSet:
    set: PaintSet
    matched_paints: list[Paint] = field(default_factory=list)
    unmatched_names: list[str] = field(default_factory=list)
    match_rate: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "set": self.set.to_dict(),
            "matchedPaints": [p.to_dict() for p in self.matched_paints],
            "unmatchedNames": list(self.unmatched_names),
            "matchRate": self.match_rate,
        }


def _build_indexes(catalog: Sequence[Paint]) -> tuple[dict[str, Paint], dict[str, Paint]]:
    by_full_name: dict[str, Paint] = {}
    by_name: dict[str, Paint] = {}
    for paint in catalog:
        by_full_name[normalize(f"{paint.brand} {paint.name}")] = paint
        by_name.setdefault(normalize(paint.name), paint)
    return by_full_name, by_name


def _fuzzy_in_brand(target: str, brand_paints: list[tuple[str, Paint]]) -> Optional[Paint]:
    for key, paint in brand_paints:
        if key in target or target in key:
            return paint
    return None


def resolve_paint_set(paint_set: PaintSet, catalog: Sequence[Paint]) -> ResolvedPaintSet:
    if not isinstance(catalog, (list, tuple)):
        raise TypeError(f"catalog must be a list of Paint, got {type(catalog).__name__}")

    by_full_name, by_name = _build_indexes(catalog)
    # tier 3 candidates; names that normalize to "" would contain-match anything
    brand_paints = [
        (normalize(p.name), p)
        for p in catalog
        if brands_match(paint_set.brand, p.brand) and normalize(p.name)
    ]

    matched: list[Paint] = []
    unmatched: list[str] = []

    for paint_name in paint_set.paint_names:
        target = normalize(paint_name)
        if not target:
            unmatched.append(paint_name)
            continue

        paint = by_full_name.get(normalize(f"{paint_set.brand} {paint_name}"))

        if paint is None:
            candidate = by_name.get(target)
            if candidate is not None and brands_match(paint_set.brand, candidate.brand):
                paint = candidate

        if paint is None:
            paint = _fuzzy_in_brand(target, brand_paints)

        if paint is None:
            unmatched.append(paint_name)
        else:
            matched.append(paint)

    total = len(paint_set.paint_names)
    match_rate = (len(matched) / total) * 100 if total > 0 else 0.0

    logger.info(
        f"Resolved paint set {paint_set.set_id!r}: {len(matched)}/{total} matched "
        f"({match_rate:.0f}%)"
    )
    if unmatched:
        logger.debug(f"Unmatched names in {paint_set.set_id!r}: {unmatched}")

    return ResolvedPaintSet(
        set=paint_set,
        matched_paints=matched,
        unmatched_names=unmatched,
        match_rate=match_rate,
    )


def resolve_paint_sets(paint_sets: Sequence[PaintSet], catalog: Sequence[Paint]) -> list[ResolvedPaintSet]:
    return [resolve_paint_set(s, catalog) for s in paint_sets]


def get_paint_set_coverage(paint_sets: Sequence[PaintSet], catalog: Sequence[Paint]) -> dict[str, Any]:
    """Aggregate resolution stats across several paint sets."""
    resolved = resolve_paint_sets(paint_sets, catalog)

    sets_by_brand: dict[str, int] = {}
    for s in paint_sets:
        sets_by_brand[s.brand] = sets_by_brand.get(s.brand, 0) + 1

    average = sum(r.match_rate for r in resolved) / len(resolved) if resolved else 0.0

    return {
        "totalSets": len(paint_sets),
        "totalPaintsInSets": sum(s.paint_count for s in paint_sets),
        "averageMatchRate": average,
        "setsByBrand": sets_by_brand,
    }
