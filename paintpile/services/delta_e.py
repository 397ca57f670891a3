"""
Delta E — CIE76 perceptual distance and the similarity calibration curve.

Similarity breakpoints (ΔE → score):
  0 → 100, ≤1 → 99, ≤2 → 95, ≤5 → 90, ≤10 → 80, ≤20 → 60, ≤30 → 40, ≤40 → 20,
  beyond the last breakpoint the score decays linearly to 0.
"""
from __future__ import annotations

import math
from typing import Sequence

from .color_space import LAB

# (max ΔE inclusive, similarity). Must be sorted by ΔE ascending.
SIMILARITY_BREAKPOINTS: tuple[tuple[float, float], ...] = (
    (1.0, 99.0),
    (2.0, 95.0),
    (5.0, 90.0),
    (10.0, 80.0),
    (20.0, 60.0),
    (30.0, 40.0),
    (40.0, 20.0),
)
TAIL_START = 10.0  # similarity just past the last breakpoint
TAIL_SLOPE = 5.0   # ΔE units per similarity point lost


def delta_e_76(lab1: LAB | Sequence[float], lab2: LAB | Sequence[float]) -> float:
    """Euclidean distance in L*a*b* space. Symmetric, zero iff identical."""
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2
    return math.sqrt((L2 - L1) ** 2 + (a2 - a1) ** 2 + (b2 - b1) ** 2)


def similarity_from_delta_e(
    delta_e: float,
    breakpoints: Sequence[tuple[float, float]] = SIMILARITY_BREAKPOINTS,
) -> float:
    """Map a raw ΔE onto a 0-100 score. Non-increasing in delta_e."""
    if delta_e < 0:
        raise ValueError(f"delta_e must be non-negative, got {delta_e}")
    if delta_e == 0:
        return 100.0
    for max_delta, score in breakpoints:
        if delta_e <= max_delta:
            return float(score)
    last_delta = breakpoints[-1][0] if breakpoints else 0.0
    return max(0.0, TAIL_START - (delta_e - last_delta) / TAIL_SLOPE)
