"""
PeriodiCode Errors

Two tiers of failure, kept in two separate exception hierarchies:

- PeriodiCodeError: recoverable, grammar-level. Aborts the current
  statement or line; interpreter state only reflects statements that
  completed before it.
- PeriodiCodeFatal: a broken invariant in the input program itself
  (failed assertion, unknown directive, bad radix, malformed block).
  It does not derive from PeriodiCodeError, so a handler for the
  recoverable tier never catches it.
"""

from fractions import Fraction
from typing import Optional


# ============================================================================
# Error Codes
# ============================================================================

# Recoverable
E_PARSE_ERROR = "E_PARSE_ERROR"
E_LITERAL_ERROR = "E_LITERAL_ERROR"
E_SYNTAX_ERROR = "E_SYNTAX_ERROR"
E_REMAINING_INPUT = "E_REMAINING_INPUT"
E_DIVISION_BY_ZERO = "E_DIVISION_BY_ZERO"
E_LOAD_ERROR = "E_LOAD_ERROR"

# Fatal
E_ASSERTION_FAILED = "E_ASSERTION_FAILED"
E_UNSUPPORTED_FUNCTION = "E_UNSUPPORTED_FUNCTION"
E_INVALID_RADIX = "E_INVALID_RADIX"
E_UNTERMINATED_BLOCK = "E_UNTERMINATED_BLOCK"
E_EMPTY_BLOCK = "E_EMPTY_BLOCK"


# ============================================================================
# Recoverable Errors
# ============================================================================

class PeriodiCodeError(Exception):
    """Base exception for recoverable PeriodiCode errors"""
    stack_trace = None

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class LiteralError(PeriodiCodeError):
    """The input does not start with a well-formed numeric literal"""
    def __init__(self, message: str):
        super().__init__(E_LITERAL_ERROR, message)


class LoadError(PeriodiCodeError):
    """A file requested by @load / @load_dirty could not be read"""
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(E_LOAD_ERROR, f"cannot load `{path}`: {reason}")


# ============================================================================
# Fatal Errors
# ============================================================================

class PeriodiCodeFatal(Exception):
    """Base exception for fatal PeriodiCode conditions"""
    stack_trace = None

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class AssertionFailed(PeriodiCodeFatal):
    """@assert_eq received two different values"""
    def __init__(self, left: Fraction, right: Fraction):
        self.left = left
        self.right = right
        super().__init__(
            E_ASSERTION_FAILED,
            f"ASSERTION FAILED: \nleft: {_decimal(left)}\nright: {_decimal(right)}",
        )


def _decimal(x: Fraction) -> str:
    """`numer` or `numer/denom` in decimal, with no limit on the number of digits"""
    # expansion imports this module
    from .expansion import to_radix_string

    numer = to_radix_string(x.numerator, 10)
    if x.denominator == 1:
        return numer
    return f"{numer}/{to_radix_string(x.denominator, 10)}"


class UnsupportedFunction(PeriodiCodeFatal):
    """An @name that is neither a radix nor a built-in directive"""
    def __init__(self, name: str):
        self.name = name
        super().__init__(E_UNSUPPORTED_FUNCTION, f"UNSUPPORTED FUNCTION: `@{name}`")


class InvalidRadix(PeriodiCodeFatal):
    """A radix context outside the supported range"""
    def __init__(self, radix: int, message: Optional[str] = None):
        self.radix = radix
        super().__init__(E_INVALID_RADIX, message or f"radix {radix} is not supported")


class BlockError(PeriodiCodeFatal):
    """A `{ ... }` block that is empty or never closed"""
    pass


def with_stack_trace(error, stack_trace):
    """
    Prefix an error message with the logical files it was raised in.

    Args:
        error: PeriodiCodeError or PeriodiCodeFatal instance
        stack_trace: Sequence of logical file names, outermost first

    Returns:
        The same error, with `message` and its string form rewritten
    """
    # Only the innermost interpreter labels the error
    if error.stack_trace is not None:
        return error
    error.stack_trace = tuple(stack_trace)
    if not stack_trace:
        return error
    prefix = "".join(f"{name}:" for name in stack_trace)
    error.message = f"{prefix} {error.message}"
    error.args = (f"[{error.code}] {error.message}",)
    return error


__all__ = [
    'PeriodiCodeError', 'LiteralError', 'LoadError',
    'PeriodiCodeFatal', 'AssertionFailed', 'UnsupportedFunction',
    'InvalidRadix', 'BlockError',
    'with_stack_trace',
    'E_PARSE_ERROR', 'E_LITERAL_ERROR', 'E_SYNTAX_ERROR',
    'E_REMAINING_INPUT', 'E_DIVISION_BY_ZERO', 'E_LOAD_ERROR',
    'E_ASSERTION_FAILED', 'E_UNSUPPORTED_FUNCTION', 'E_INVALID_RADIX',
    'E_UNTERMINATED_BLOCK', 'E_EMPTY_BLOCK',
]
