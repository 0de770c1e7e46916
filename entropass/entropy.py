"""
Entropy estimate and strength rating for a configured password space.

Entropy here models the search space (pool size and length), never the
realized string: H = log2(R^L) = L * log2(R).
"""

from __future__ import annotations

import math
from enum import Enum

from .config import (
    MIN_ENTROPY_BITS,
    MODERATE_THRESHOLD,
    STRONG_THRESHOLD,
    WEAK_THRESHOLD,
)


class StrengthLabel(Enum):
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"

    def __str__(self) -> str:
        return self.value


# Bar colours per tier: red, yellow, blue, green.
STRENGTH_COLORS = {
    StrengthLabel.WEAK: "#ef4444",
    StrengthLabel.MODERATE: "#eab308",
    StrengthLabel.STRONG: "#3b82f6",
    StrengthLabel.VERY_STRONG: "#22c55e",
}


def calculate_entropy(pool_size: int, length: int) -> float:
    """
    Shannon entropy in bits for `length` independent uniform draws from a
    pool of `pool_size` symbols.

    Uses the multiplicative form so large pools/lengths never overflow.
    Returns 0.0 for an empty pool or zero length.
    """
    if pool_size <= 0 or length <= 0:
        return 0.0
    return length * math.log2(pool_size)


def get_strength_label(entropy_bits: float) -> StrengthLabel:
    # Half-open intervals, lower bound inclusive.
    if entropy_bits < WEAK_THRESHOLD:
        return StrengthLabel.WEAK
    if entropy_bits < MODERATE_THRESHOLD:
        return StrengthLabel.MODERATE
    if entropy_bits < STRONG_THRESHOLD:
        return StrengthLabel.STRONG
    return StrengthLabel.VERY_STRONG


def get_entropy_percentage(entropy_bits: float) -> float:
    """
    Map bits onto a 0-100 bar (100 bits fills it). Display only.
    """
    return max(0.0, min(entropy_bits / 100 * 100, 100.0))


def get_strength_color(entropy_bits: float) -> str:
    return STRENGTH_COLORS[get_strength_label(entropy_bits)]


def meets_minimum_entropy(entropy_bits: float) -> bool:
    """True when the space reaches the recommended 60-bit floor."""
    return entropy_bits >= MIN_ENTROPY_BITS
