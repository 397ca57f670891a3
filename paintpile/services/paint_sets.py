"""
Paint Sets — curated lists of paint names sold together as one product.

Names are listed exactly as they appear on the product page; the resolver
maps them to catalog paints.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class PaintSet:
    set_id: str
    set_name: str
    brand: str
    paint_names: list[str] = field(default_factory=list)
    paint_count: int = 0
    is_curated: bool = False
    description: Optional[str] = None
    release_year: Optional[int] = None
    source_url: Optional[str] = None

    def summary(self) -> dict[str, Any]:
        return {
            "setId": self.set_id,
            "setName": self.set_name,
            "brand": self.brand,
            "paintCount": self.paint_count,
            "description": self.description,
            "isCurated": self.is_curated,
            "releaseYear": self.release_year,
        }

    def to_dict(self) -> dict[str, Any]:
        d = self.summary()
        d["paintNames"] = list(self.paint_names)
        d["sourceUrl"] = self.source_url
        return d


CURATED_PAINT_SETS: list[PaintSet] = [
    PaintSet(
        set_id="army-painter-speedpaint-starter",
        set_name="Speedpaint Starter Set",
        brand="Army Painter",
        paint_count=10,
        is_curated=True,
        description="Essential Speedpaint colors for beginners",
        source_url="https://www.thearmypainter.com/shop/us/sp7001",
        paint_names=[
            "Holy White 2.0",
            "Zealot Yellow 2.0",
            "Fire Giant Orange 2.0",
            "Blood Red 2.0",
            "Royal Purple 2.0",
            "Magic Blue 2.0",
            "Goblin Green 2.0",
            "Gravelord Grey 2.0",
            "Hardened Carapace 2.0",
            "Grim Black 2.0",
        ],
    ),
    PaintSet(
        set_id="army-painter-fanatic-starter",
        set_name="Fanatic Paint Starter Set",
        brand="Army Painter Fanatic",
        paint_count=12,
        is_curated=True,
        description="Starter set of Fanatic acrylic paints",
        release_year=2024,
        source_url="https://www.thearmypainter.com/shop/us/fa2001",
        paint_names=[
            "Matt Black",
            "Matt White",
            "Deep Red",
            "Bright Orange",
            "Sun Yellow",
            "Oak Brown",
            "Jungle Green",
            "Ocean Blue",
            "Royal Purple",
            "Stone Grey",
            "Bronze",
            "Silver",
        ],
    ),
    PaintSet(
        set_id="citadel-base-paint-set",
        set_name="Citadel Base Paint Set",
        brand="Citadel",
        paint_count=11,
        is_curated=True,
        description="Essential base coat paints from Games Workshop",
        source_url="https://www.games-workshop.com",
        paint_names=[
            "Abaddon Black",
            "Corax White",
            "Mephiston Red",
            "Caliban Green",
            "Macragge Blue",
            "Balthasar Gold",
            "Leadbelcher",
            "Rakarth Flesh",
            "Zandri Dust",
            "Rhinox Hide",
            "Screamer Pink",
        ],
    ),
    PaintSet(
        set_id="citadel-essentials-set",
        set_name="Citadel Essentials Set",
        brand="Citadel",
        paint_count=8,
        is_curated=True,
        description="Core paint collection for new hobbyists",
        source_url="https://www.games-workshop.com",
        paint_names=[
            "Abaddon Black",
            "Corax White",
            "Mephiston Red",
            "Caliban Green",
            "Macragge Blue",
            "Balthasar Gold",
            "Nuln Oil",
            "Agrax Earthshade",
        ],
    ),
    PaintSet(
        set_id="vallejo-basic-usa-colors",
        set_name="Basic USA Colors Set",
        brand="Vallejo Model Color",
        paint_count=8,
        is_curated=True,
        description="WWII US military vehicle colors",
        source_url="https://acrylicosvallejo.com",
        paint_names=[
            "Olive Drab",
            "Yellow Olive",
            "USA Tan Earth",
            "Khaki",
            "White",
            "Black",
            "Burnt Umber",
            "Dark Yellow",
        ],
    ),
    PaintSet(
        set_id="vallejo-game-color-intro",
        set_name="Game Color Introduction Set",
        brand="Vallejo Game Color",
        paint_count=8,
        is_curated=True,
        description="Starter set for fantasy miniatures",
        source_url="https://acrylicosvallejo.com",
        paint_names=[
            "Black",
            "White",
            "Bloody Red",
            "Scrofulous Brown",
            "Goblin Green",
            "Electric Blue",
            "Sun Yellow",
            "Bonewhite",
        ],
    ),
    PaintSet(
        set_id="reaper-core-colors",
        set_name="Core Colors Paint Set",
        brand="Reaper MSP",
        paint_count=6,
        is_curated=True,
        description="Essential colors for all miniature painting",
        source_url="https://www.reapermini.com",
        paint_names=[
            "Pure Black",
            "Pure White",
            "Blood Red",
            "Viper Green",
            "Ultramarine Blue",
            "Brilliant Yellow",
        ],
    ),
    PaintSet(
        set_id="scale75-basic-set",
        set_name="Fantasy & Games Basic Set",
        brand="Scale75",
        paint_count=8,
        is_curated=True,
        description="Essential colors for fantasy miniatures",
        source_url="https://scale75.com",
        paint_names=[
            "Black",
            "White",
            "Red",
            "Yellow",
            "Blue",
            "Green",
            "Leather Brown",
            "Metal Medium",
        ],
    ),
]


def get_paint_set_brands(sets: list[PaintSet] = CURATED_PAINT_SETS) -> list[str]:
    return sorted({s.brand for s in sets})


def get_paint_sets_by_brand(brand: str, sets: list[PaintSet] = CURATED_PAINT_SETS) -> list[PaintSet]:
    wanted = brand.lower()
    return [s for s in sets if s.brand.lower() == wanted]


def get_paint_set_by_id(set_id: str, sets: list[PaintSet] = CURATED_PAINT_SETS) -> Optional[PaintSet]:
    return next((s for s in sets if s.set_id == set_id), None)


def search_paint_sets(query: str, sets: list[PaintSet] = CURATED_PAINT_SETS) -> list[PaintSet]:
    """Case-insensitive substring search over set name, brand and description."""
    q = query.lower()
    return [
        s for s in sets
        if q in s.set_name.lower()
        or q in s.brand.lower()
        or (s.description is not None and q in s.description.lower())
    ]
