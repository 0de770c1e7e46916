"""
Configuration and fixed constants for the entropy-rated password generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable


class CharacterClass(Enum):
    # Declaration order is the canonical pool order.
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"


CHARACTER_SETS: dict[CharacterClass, str] = {
    CharacterClass.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    CharacterClass.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
    CharacterClass.NUMBERS: "0123456789",
    CharacterClass.SYMBOLS: "!@#$%^&*()_+-=[]{}|;:,.<>?",
}

# Password length bounds (inclusive).
MIN_LENGTH = 8
MAX_LENGTH = 64
DEFAULT_LENGTH = 16

# Salt is a visible suffix; 0 means "no salt".
SALT_DEFAULT_LENGTH = 16
MIN_SALT_LENGTH = 4
MAX_SALT_LENGTH = 256

# NIST-style floor used for warnings only.
MIN_ENTROPY_BITS = 60

# Lower bounds (bits) of Moderate, Strong and Very Strong.
WEAK_THRESHOLD = 30
MODERATE_THRESHOLD = 50
STRONG_THRESHOLD = 70
ENTROPY_THRESHOLDS = (WEAK_THRESHOLD, MODERATE_THRESHOLD, STRONG_THRESHOLD)


@dataclass(frozen=True)
class GenerationOptions:
    # Desired password length in characters.
    length: int = DEFAULT_LENGTH

    # Classes that must each appear at least once and make up the pool.
    enabled_classes: FrozenSet[CharacterClass] = field(
        default_factory=lambda: frozenset(CharacterClass)
    )

    def __post_init__(self) -> None:
        # Accept any iterable but always store an immutable set.
        if not isinstance(self.enabled_classes, frozenset):
            object.__setattr__(
                self, "enabled_classes", frozenset(self.enabled_classes)
            )
        unknown = [c for c in self.enabled_classes if not isinstance(c, CharacterClass)]
        if unknown:
            raise ValueError(
                f"enabled_classes must hold CharacterClass members, got {unknown!r}"
            )

    @classmethod
    def from_flags(
        cls,
        length: int = DEFAULT_LENGTH,
        uppercase: bool = True,
        lowercase: bool = True,
        numbers: bool = True,
        symbols: bool = True,
    ) -> "GenerationOptions":
        """
        Build options from the four include/exclude switches a form exposes.
        """
        flags = {
            CharacterClass.UPPERCASE: uppercase,
            CharacterClass.LOWERCASE: lowercase,
            CharacterClass.NUMBERS: numbers,
            CharacterClass.SYMBOLS: symbols,
        }
        return cls(length, frozenset(c for c, on in flags.items() if on))

    def ordered_classes(self) -> list[CharacterClass]:
        """Enabled classes in canonical order."""
        return ordered(self.enabled_classes)


def ordered(classes: Iterable[CharacterClass]) -> list[CharacterClass]:
    wanted = set(classes)
    return [c for c in CharacterClass if c in wanted]


@dataclass
class QuantumSourceConfig:
    # Number of qubits prepared in superposition per circuit run.
    # NOTE: Keep this <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20

    # SHA-256 mixing rounds applied to each combined bitstream.
    entropy_rounds: int = 2

    # Independent circuit runs XOR-combined per refill.
    quantum_streams: int = 2


# Default configurations you can import elsewhere
DEFAULT_OPTIONS = GenerationOptions()
DEFAULT_QUANTUM_CONFIG = QuantumSourceConfig()
