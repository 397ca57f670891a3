"""Paint set listing and resolution against the paint catalog."""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException

from ..models.requests import ResolvePaintSetRequest
from ..services import paint_sets
from ..services.catalog import Paint, load_catalog
from ..services.paint_set_resolver import resolve_paint_set

router = APIRouter(prefix="/api/paint-sets")
logger = logging.getLogger(__name__)


@router.get("/list")
async def list_paint_sets(brand: Optional[str] = None, query: Optional[str] = None) -> dict[str, Any]:
    sets = paint_sets.CURATED_PAINT_SETS
    if brand:
        sets = paint_sets.get_paint_sets_by_brand(brand)
    if query:
        sets = paint_sets.search_paint_sets(query, sets)

    sets_by_brand: dict[str, list[dict[str, Any]]] = {}
    for s in sets:
        sets_by_brand.setdefault(s.brand, []).append(s.summary())

    return {
        "sets": [s.summary() for s in sets],
        "setsByBrand": sets_by_brand,
        "brands": paint_sets.get_paint_set_brands(),
        "totalSets": len(sets),
        "curatedSets": sum(1 for s in sets if s.is_curated),
    }


@router.post("/resolve")
async def resolve_set(
    req: ResolvePaintSetRequest,
    catalog: list[Paint] = Depends(load_catalog),
) -> dict[str, Any]:
    """
    Resolve a curated paint set to catalog paints.

    Looks the set up by id, or by name search (optionally narrowed by brand,
    falling back to the first search hit when no hit has that brand).
    """
    if not req.set_id and not req.set_name:
        raise HTTPException(status_code=400, detail="Either setId or setName is required")

    if req.set_id:
        paint_set = paint_sets.get_paint_set_by_id(req.set_id)
        if paint_set is None:
            raise HTTPException(status_code=404, detail=f"Paint set not found: {req.set_id}")
    else:
        results = paint_sets.search_paint_sets(req.set_name)
        if not results:
            raise HTTPException(
                status_code=404,
                detail=f"No paint sets found matching: {req.set_name}",
            )
        paint_set = results[0]
        if req.brand:
            same_brand = [s for s in results if s.brand.lower() == req.brand.lower()]
            if same_brand:
                paint_set = same_brand[0]

    resolved = resolve_paint_set(paint_set, catalog)
    match_rate = round(resolved.match_rate)
    if resolved.unmatched_names:
        logger.info(f"Paint set {paint_set.set_id} unmatched: {resolved.unmatched_names}")

    return {
        "set": paint_set.summary(),
        "paints": [p.to_dict() for p in resolved.matched_paints],
        "matchedCount": len(resolved.matched_paints),
        "unmatchedCount": len(resolved.unmatched_names),
        "unmatchedNames": resolved.unmatched_names,
        "matchRate": match_rate,
        "warning": (
            f"Only {match_rate}% of paints were matched. "
            f"{len(resolved.unmatched_names)} paints not found in catalog."
            if resolved.match_rate < 100 else None
        ),
    }
