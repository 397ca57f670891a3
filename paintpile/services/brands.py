"""
Brand equivalence — tolerate naming variants of the same paint brand.

Keys in BRAND_EQUIVALENTS are canonical brands; values list every normalized
spelling seen in catalogs and paint-set data. Keep this in sync with the
brand strings actually present in the catalog.
"""
from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]")

BRAND_EQUIVALENTS: dict[str, tuple[str, ...]] = {
    "armypainter": ("armypainter", "thearmypainter"),
    "citadel": ("citadel", "gamesworkshop", "gw"),
    "vallejo": ("vallejo", "vallejomodelcolor", "vallejogamecolor"),
    "reaper": ("reaper", "reapermsp", "reaperminiatures"),
    "scale75": ("scale75", "scale", "scalecolor"),
}


def normalize(text: str) -> str:
    """Lowercase and drop everything except a-z and 0-9."""
    return _NON_ALNUM.sub("", text.lower())


def brands_match(brand1: str, brand2: str) -> bool:
    """
    True when two brand strings name the same brand: equal after
    normalization, one contained in the other, or listed together in
    BRAND_EQUIVALENTS.
    """
    b1 = normalize(brand1)
    b2 = normalize(brand2)

    if b1 == b2:
        return True
    if b1 in b2 or b2 in b1:
        return True

    return any(b1 in variants and b2 in variants for variants in BRAND_EQUIVALENTS.values())
