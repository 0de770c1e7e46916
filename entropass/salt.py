"""
Salt helpers.

A salt here is a visible string appended to a generated password. It is
not fed to any hash, and the reported entropy never includes it.
"""

from __future__ import annotations

from .config import MAX_SALT_LENGTH, MIN_SALT_LENGTH, SALT_DEFAULT_LENGTH
from .errors import Err, Ok, Result, ValidationError, ValidationErrorKind
from .pool import union_alphabet
from .random_source import DEFAULT_SOURCE, RandomSource, choice

SALT_DISCLOSURE = (
    "Note: the appended salt is not included in the reported entropy."
)


def generate_salt(
    length: int = SALT_DEFAULT_LENGTH,
    source: RandomSource | None = None,
) -> str:
    """
    Draw `length` independent characters from all 88 symbols.
    """
    if length < 0:
        raise ValueError(f"salt length cannot be negative (got {length})")
    src = source or DEFAULT_SOURCE
    charset = union_alphabet()
    return "".join(choice(charset, src) for _ in range(length))


def validate_salt(salt: str) -> Result[None]:
    # Empty means "no salt" and is always fine.
    if not salt:
        return Ok(None)
    if len(salt) < MIN_SALT_LENGTH:
        return Err(
            ValidationError(
                ValidationErrorKind.SALT_TOO_SHORT,
                f"Salt should be at least {MIN_SALT_LENGTH} characters",
            )
        )
    if len(salt) > MAX_SALT_LENGTH:
        return Err(
            ValidationError(
                ValidationErrorKind.SALT_TOO_LONG,
                f"Salt should not exceed {MAX_SALT_LENGTH} characters",
            )
        )
    return Ok(None)


def apply_salt(password: str, salt: str) -> str:
    """Display composition: the password with the salt appended, as-is."""
    return password + salt if salt else password
