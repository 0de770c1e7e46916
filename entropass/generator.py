"""
High-level password generation with guaranteed class diversity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import CHARACTER_SETS, DEFAULT_OPTIONS, GenerationOptions
from .entropy import calculate_entropy
from .errors import Ok, Result
from .pool import build_character_pool
from .random_source import DEFAULT_SOURCE, RandomSource, choice, shuffle
from .validation import validate_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PasswordResult:
    """
    Full result of one password generation.
    """
    # Final password, exactly options.length characters.
    password: str

    # Entropy of the configured space (pool size and length), in bits.
    entropy_bits: float

    # Number of symbols the password was drawn from.
    pool_size: int


def generate_password(
    options: GenerationOptions | None = None,
    source: RandomSource | None = None,
) -> Result[PasswordResult]:
    """
    Generation pipeline:

    - Validate the options; invalid options return Err before any draw.
    - Draw one character from each enabled class's own alphabet.
    - Fill the remaining positions from the full pool, repeats allowed.
    - Fisher-Yates shuffle everything so the guaranteed characters
      land in uniformly random positions.
    """
    opts = options or DEFAULT_OPTIONS
    src = source or DEFAULT_SOURCE

    checked = validate_options(opts)
    if checked.is_err():
        return checked

    pool = build_character_pool(opts.enabled_classes)

    chars = [choice(CHARACTER_SETS[c], src) for c in opts.ordered_classes()]
    remaining = max(0, opts.length - len(chars))
    chars.extend(choice(pool, src) for _ in range(remaining))

    shuffle(chars, src)

    entropy_bits = calculate_entropy(len(pool), opts.length)
    logger.debug(
        "generated password: length=%d pool=%d entropy=%.2f bits",
        opts.length,
        len(pool),
        entropy_bits,
    )

    return Ok(
        PasswordResult(
            password="".join(chars),
            entropy_bits=entropy_bits,
            pool_size=len(pool),
        )
    )
