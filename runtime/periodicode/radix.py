"""
Radix Names and Literal Prefixes

Static tables mapping radix names (as used by `@decimal { ... }` and
`@set_radix(@hex)`) and literal prefixes (as in `0x1f`) to integer bases.

Lookups return None for unknown names and prefixes; the caller decides
whether that is an error.
"""

from typing import Optional, Tuple

from .errors import InvalidRadix


MIN_RADIX = 2
MAX_RADIX = 25
DEFAULT_RADIX = 10

# Literal prefixes, longest first so that `0qn` / `0qt` win over shorter ones
RADIX_PREFIXES = (
    ('0qn', 5),
    ('0qt', 4),
    ('0v', 20),
    ('0x', 16),
    ('0z', 12),
    ('0d', 10),
    ('0o', 8),
    ('0s', 6),
    ('0t', 3),
    ('0b', 2),
)

# Case-sensitive radix names
RADIX_NAMES = {
    'binary': 2,
    'trinary': 3,
    'ternary': 3,
    'quaternary': 4,
    'quinary': 5,
    'pental': 5,
    'senary': 6,
    'seximal': 6,
    'heximal': 6,
    'octal': 8,
    'oct': 8,
    'decimal': 10,
    'denary': 10,
    'decanary': 10,
    'dec': 10,
    'duodecimal': 12,
    'dozenal': 12,
    'hexadecimal': 16,
    'hex': 16,
    'vigesimal': 20,
}


def radix_of_prefix(prefix: str) -> Optional[int]:
    """Return the radix for an exact literal prefix such as '0x'"""
    for candidate, radix in RADIX_PREFIXES:
        if candidate == prefix:
            return radix
    return None


def radix_of_name(name: str) -> Optional[int]:
    """Return the radix for a name such as 'dozenal'"""
    return RADIX_NAMES.get(name)


def strip_radix_prefix(text: str) -> Tuple[str, Optional[int]]:
    """
    Split a leading radix prefix off a literal.

    Args:
        text: Input starting at a literal

    Returns:
        (text without the prefix, radix of the prefix or None)

    Example:
        >>> strip_radix_prefix('0qn12')
        ('12', 5)
        >>> strip_radix_prefix('12')
        ('12', None)
    """
    for prefix, radix in RADIX_PREFIXES:
        if text.startswith(prefix):
            return text[len(prefix):], radix
    return text, None


def validate_radix(radix: int) -> int:
    """Raise InvalidRadix unless MIN_RADIX <= radix <= MAX_RADIX"""
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise InvalidRadix(radix, f"radix must be an integer, got {radix!r}")
    if radix < MIN_RADIX:
        raise InvalidRadix(radix, f"radix smaller than {MIN_RADIX} is not supported")
    if radix > MAX_RADIX:
        raise InvalidRadix(radix, f"radix greater than {MAX_RADIX} is not supported")
    return radix


__all__ = [
    'MIN_RADIX', 'MAX_RADIX', 'DEFAULT_RADIX',
    'RADIX_PREFIXES', 'RADIX_NAMES',
    'radix_of_prefix', 'radix_of_name', 'strip_radix_prefix', 'validate_radix',
]
