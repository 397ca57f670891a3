"""POST /api/color-match — hex color(s) → ranked catalog paints."""
from __future__ import annotations

import logging
import os
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from ..models.requests import ColorMatchRequest, RoleMatchRequest
from ..services.catalog import Paint, load_catalog
from ..services.color_matcher import find_matches_by_role, find_matching_paints
from ..services.color_space import InvalidColorFormat, hex_to_lab, normalize_hex

MAX_RESULTS = int(os.environ.get("PAINTPILE_MAX_RESULTS", "5"))

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/color-match")
async def match_color(
    req: ColorMatchRequest,
    catalog: list[Paint] = Depends(load_catalog),
) -> dict[str, Any]:
    """Return the closest catalog paints to a single hex color."""
    max_results = req.max_results or MAX_RESULTS
    try:
        target = normalize_hex(req.hex)
        matches = find_matching_paints(target, catalog, max_results)
    except InvalidColorFormat as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "target": {"hex": target, "lab": hex_to_lab(target).to_dict()},
        "matches": [m.to_dict() for m in matches],
    }


@router.post("/color-match/roles")
async def match_colors_by_role(
    req: RoleMatchRequest,
    catalog: list[Paint] = Depends(load_catalog),
) -> dict[str, Any]:
    """
    Match several colors at once, grouped by role (base/highlight/shadow...).
    Colors sharing a role replace one another; the last one is returned.
    """
    colors = [c.model_dump() for c in req.colors]
    try:
        by_role = find_matches_by_role(colors, catalog, req.matches_per_color)
    except InvalidColorFormat as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "roles": {role: [m.to_dict() for m in matches] for role, matches in by_role.items()},
    }
