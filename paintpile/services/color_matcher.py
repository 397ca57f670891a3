"""
Color Matcher — ranks catalog paints against a target hex color.

Uses CIE76 ΔE (Euclidean distance in CIELAB) for perceptual matching.
The catalog is always supplied by the caller; nothing here does I/O.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from .catalog import Paint
from .color_space import InvalidColorFormat, hex_to_lab
from .delta_e import delta_e_76, similarity_from_delta_e

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "general"


@dataclass(frozen=True)
class PaintMatch:
    paint: Paint
    similarity: float  # 0-100, 100 = identical
    delta_e: float     # 0 = identical

    def to_dict(self) -> dict[str, Any]:
        return {
            "paint": self.paint.to_dict(),
            "similarity": self.similarity,
            "deltaE": self.delta_e,
        }


def _check_catalog(catalog: Sequence[Paint]) -> None:
    if not isinstance(catalog, (list, tuple)):
        raise TypeError(f"catalog must be a list of Paint, got {type(catalog).__name__}")


def _rank(target_hex: str, catalog: Sequence[Paint]) -> list[PaintMatch]:
    target_lab = hex_to_lab(target_hex)
    matches: list[PaintMatch] = []
    for paint in catalog:
        try:
            paint_lab = hex_to_lab(paint.hex_color)
        except InvalidColorFormat:
            logger.warning(
                f"Skipping paint {paint.id} ({paint.brand} {paint.name}): "
                f"bad hex {paint.hex_color!r}"
            )
            continue
        delta_e = delta_e_76(target_lab, paint_lab)
        matches.append(PaintMatch(
            paint=paint,
            similarity=similarity_from_delta_e(delta_e),
            delta_e=delta_e,
        ))
    # sorted() is stable: ties keep catalog order
    return sorted(matches, key=lambda m: m.delta_e)


def find_matching_paints(
    target_hex: str,
    catalog: Sequence[Paint],
    max_results: int = 5,
) -> list[PaintMatch]:
    """
    Return up to max_results paints closest to target_hex, best first.

    Raises InvalidColorFormat for a malformed target. Catalog entries with
    malformed hex are skipped.
    """
    _check_catalog(catalog)
    if max_results < 0:
        raise ValueError(f"max_results must be >= 0, got {max_results}")
    if not catalog:
        return []
    return _rank(target_hex, catalog)[:max_results]


def find_closest_match(target_hex: str, catalog: Sequence[Paint]) -> Optional[PaintMatch]:
    matches = find_matching_paints(target_hex, catalog, max_results=1)
    return matches[0] if matches else None


def find_matches_by_role(
    colors: Sequence[dict[str, Any]],
    catalog: Sequence[Paint],
    matches_per_color: int = 3,
) -> dict[str, list[PaintMatch]]:
    """
    Match each {hex, location?} color and group results by role.

    A missing or empty location falls back to "general". When two colors
    share a role the later one replaces the earlier one.
    """
    results: dict[str, list[PaintMatch]] = {}
    for color in colors:
        role = color.get("location") or DEFAULT_ROLE
        if role in results:
            logger.debug(f"Role {role!r} already matched, replacing with {color['hex']}")
        results[role] = find_matching_paints(color["hex"], catalog, matches_per_color)
    return results
