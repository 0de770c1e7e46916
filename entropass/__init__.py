"""
entropass: random password generator with entropy-based strength rating.
"""

__version__ = "0.1.0"

from .config import (
    CHARACTER_SETS,
    DEFAULT_LENGTH,
    DEFAULT_OPTIONS,
    ENTROPY_THRESHOLDS,
    MAX_LENGTH,
    MIN_ENTROPY_BITS,
    MIN_LENGTH,
    SALT_DEFAULT_LENGTH,
    CharacterClass,
    GenerationOptions,
)
from .entropy import (
    StrengthLabel,
    calculate_entropy,
    get_entropy_percentage,
    get_strength_color,
    get_strength_label,
    meets_minimum_entropy,
)
from .errors import Err, Ok, ProcessingError, ValidationError, ValidationErrorKind
from .generator import PasswordResult, generate_password
from .pool import build_character_pool
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource
from .salt import apply_salt, generate_salt, validate_salt
from .validation import validate_options

__all__ = [
    "CHARACTER_SETS",
    "DEFAULT_LENGTH",
    "DEFAULT_OPTIONS",
    "ENTROPY_THRESHOLDS",
    "MAX_LENGTH",
    "MIN_ENTROPY_BITS",
    "MIN_LENGTH",
    "SALT_DEFAULT_LENGTH",
    "CharacterClass",
    "GenerationOptions",
    "StrengthLabel",
    "calculate_entropy",
    "get_entropy_percentage",
    "get_strength_color",
    "get_strength_label",
    "meets_minimum_entropy",
    "Err",
    "Ok",
    "ProcessingError",
    "ValidationError",
    "ValidationErrorKind",
    "PasswordResult",
    "generate_password",
    "build_character_pool",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "apply_salt",
    "generate_salt",
    "validate_salt",
    "validate_options",
]
