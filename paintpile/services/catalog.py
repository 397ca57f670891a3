"""
Paint Catalog — the read-only list of commercial paints the engine matches against.

The catalog is loaded once from a JSON file (a list of paint records) and
cached. Matching code never loads it itself: callers pass the list in.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

DATA_PATH = Path(
    os.environ.get(
        "PAINTPILE_CATALOG_PATH",
        Path(__file__).parent.parent / "data" / "paints.json",
    )
)

PAINT_TYPES = ("base", "layer", "shade", "metallic", "technical", "contrast")


@dataclass(frozen=True)
class Paint:
    id: str
    brand: str
    name: str
    hex_color: str
    type: str = "base"
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Paint":
        paint_id = data.get("paintId", data.get("id"))
        hex_color = data.get("hexColor", data.get("hex_color"))
        if paint_id is None or hex_color is None:
            raise KeyError(f"Paint record missing id or hexColor: {data!r}")
        return cls(
            id=str(paint_id),
            brand=data["brand"],
            name=data["name"],
            hex_color=hex_color,
            type=data.get("type", "base"),
            category=data.get("category"),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "paintId": self.id,
            "brand": self.brand,
            "name": self.name,
            "hexColor": self.hex_color,
            "type": self.type,
        }
        if self.category is not None:
            d["category"] = self.category
        return d


class PaintCatalog:
    def __init__(self, path: Path = DATA_PATH) -> None:
        self._path = path
        self._paints: list[Paint] = []
        self._loaded = False

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        if self._path.exists():
            records = json.loads(self._path.read_text(encoding="utf-8"))
            self._paints = [Paint.from_dict(r) for r in records]
            logger.info(f"Loaded {len(self._paints)} paints from {self._path}")
        else:
            self._paints = _builtin_catalog()
            logger.info(
                f"Catalog file {self._path} not found, using built-in catalog "
                f"({len(self._paints)} paints)"
            )
        self._loaded = True

    def paints(self) -> list[Paint]:
        self._ensure_loaded()
        return self._paints

    def reload(self) -> list[Paint]:
        self._loaded = False
        return self.paints()


_catalog = PaintCatalog()


def load_catalog() -> list[Paint]:
    return _catalog.paints()


def _builtin_catalog() -> list[Paint]:
    """Small fallback catalog when the JSON file is missing."""
    rows = [
        ("citadel-abaddon-black", "Citadel", "Abaddon Black", "#231f20", "base"),
        ("citadel-corax-white", "Citadel", "Corax White", "#ffffff", "base"),
        ("citadel-mephiston-red", "Citadel", "Mephiston Red", "#9a1115", "base"),
        ("citadel-caliban-green", "Citadel", "Caliban Green", "#00401f", "base"),
        ("citadel-macragge-blue", "Citadel", "Macragge Blue", "#0d407f", "base"),
        ("citadel-balthasar-gold", "Citadel", "Balthasar Gold", "#a47552", "metallic"),
        ("citadel-leadbelcher", "Citadel", "Leadbelcher", "#888d8f", "metallic"),
        ("citadel-rakarth-flesh", "Citadel", "Rakarth Flesh", "#9c998d", "base"),
        ("citadel-zandri-dust", "Citadel", "Zandri Dust", "#9e915c", "base"),
        ("citadel-rhinox-hide", "Citadel", "Rhinox Hide", "#462f30", "base"),
        ("citadel-screamer-pink", "Citadel", "Screamer Pink", "#7c1645", "base"),
        ("citadel-nuln-oil", "Citadel", "Nuln Oil", "#14100e", "shade"),
        ("citadel-agrax-earthshade", "Citadel", "Agrax Earthshade", "#5a573f", "shade"),
        ("ap-holy-white", "The Army Painter", "Holy White 2.0", "#f2f2f0", "contrast"),
        ("ap-zealot-yellow", "The Army Painter", "Zealot Yellow 2.0", "#e3b505", "contrast"),
        ("ap-fire-giant-orange", "The Army Painter", "Fire Giant Orange 2.0", "#d3541b", "contrast"),
        ("ap-blood-red", "The Army Painter", "Blood Red 2.0", "#9f1d20", "contrast"),
        ("ap-royal-purple", "The Army Painter", "Royal Purple 2.0", "#4b2367", "contrast"),
        ("ap-magic-blue", "The Army Painter", "Magic Blue 2.0", "#1f5fa8", "contrast"),
        ("ap-goblin-green", "The Army Painter", "Goblin Green 2.0", "#3c7a2e", "contrast"),
        ("ap-gravelord-grey", "The Army Painter", "Gravelord Grey 2.0", "#5d5f63", "contrast"),
        ("ap-hardened-carapace", "The Army Painter", "Hardened Carapace 2.0", "#3a2a24", "contrast"),
        ("ap-grim-black", "The Army Painter", "Grim Black 2.0", "#1b1b1d", "contrast"),
        ("vmc-olive-drab", "Vallejo Model Color", "Olive Drab", "#4f4b2f", "base"),
        ("vmc-khaki", "Vallejo Model Color", "Khaki", "#a69b6f", "base"),
        ("vmc-black", "Vallejo Model Color", "Black", "#171717", "base"),
        ("vmc-white", "Vallejo Model Color", "White", "#f4f4f0", "base"),
        ("vgc-bloody-red", "Vallejo Game Color", "Bloody Red", "#b01d22", "base"),
        ("vgc-goblin-green", "Vallejo Game Color", "Goblin Green", "#3f8a3a", "base"),
        ("reaper-pure-black", "Reaper MSP", "Pure Black", "#101010", "base"),
        ("reaper-pure-white", "Reaper MSP", "Pure White", "#fbfbfb", "base"),
        ("scale75-black", "Scale75", "Black", "#141414", "base"),
        ("scale75-white", "Scale75", "White", "#f7f7f7", "base"),
    ]
    return [
        Paint(id=pid, brand=brand, name=name, hex_color=hx, type=ptype)
        for pid, brand, name, hx, ptype in rows
    ]
