"""
Character pool construction: the working alphabet for one generation.
"""

from __future__ import annotations

from typing import Iterable

from .config import CHARACTER_SETS, CharacterClass, ordered


def build_character_pool(enabled_classes: Iterable[CharacterClass]) -> str:
    """
    Concatenate the alphabets of the enabled classes in canonical order
    (uppercase, lowercase, numbers, symbols).

    Nothing is deduplicated or reordered; an empty selection gives "".
    """
    return "".join(CHARACTER_SETS[c] for c in ordered(enabled_classes))


def union_alphabet() -> str:
    """All four alphabets: the 88-character salt charset."""
    return build_character_pool(CharacterClass)
