"""
Options validation. Runs before any random character is drawn.
"""

from __future__ import annotations

import logging

from .config import MAX_LENGTH, MIN_LENGTH, GenerationOptions
from .errors import Err, Ok, Result, ValidationError, ValidationErrorKind

logger = logging.getLogger(__name__)


def validate_options(options: GenerationOptions) -> Result[None]:
    """
    Return Ok(None) for a usable configuration, otherwise Err carrying
    NO_CHARACTER_CLASS_SELECTED (checked first, whatever the length) or
    INVALID_LENGTH.
    """
    if not options.enabled_classes:
        logger.info("rejected options: no character class selected")
        return Err(
            ValidationError(
                ValidationErrorKind.NO_CHARACTER_CLASS_SELECTED,
                "Please select at least one character type",
            )
        )

    length = options.length
    # bool is an int subclass; a checkbox value is not a length.
    if (
        not isinstance(length, int)
        or isinstance(length, bool)
        or not MIN_LENGTH <= length <= MAX_LENGTH
    ):
        logger.info("rejected options: length %r out of range", length)
        return Err(
            ValidationError(
                ValidationErrorKind.INVALID_LENGTH,
                f"Password length must be between {MIN_LENGTH} and {MAX_LENGTH}",
            )
        )

    return Ok(None)
