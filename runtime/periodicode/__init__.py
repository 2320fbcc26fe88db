"""
PeriodiCode - Exact Rational Calculator Language

An interactive calculator over exact rationals with per-scope radix
control and literal syntax for repeating digits and continued fractions:

    1/7                 -> frac: 1/7, cont: [0; 7], digt: 0.r142857
    12.1r6              -> 73/6
    [0; 2, 3]           -> 3/7
    @dozenal { 10 }     -> 12
    0x1.p-10            -> 1/1024

**Language:**
- Numeric literal grammar (radix prefixes, `r` repeating digits, e/xp/p exponents)
- Expression evaluator (arithmetic, `$_`, blocks, continued-fraction literals)
- Directives: @assert_eq, @set_radix, @<radix name>{...}, @load, @load_dirty
- Statement sequencing (`;`, `#` comments, blocks)

**Presentation:**
- Continued-fraction and positional digit expansions
- Fraction / continued fraction / digit summaries for the console

Version: 0.1.0
"""

import logging

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    PeriodiCodeError, LiteralError, LoadError,
    PeriodiCodeFatal, AssertionFailed, UnsupportedFunction, InvalidRadix, BlockError,
    E_PARSE_ERROR, E_LITERAL_ERROR, E_SYNTAX_ERROR, E_REMAINING_INPUT,
    E_DIVISION_BY_ZERO, E_LOAD_ERROR,
    E_ASSERTION_FAILED, E_UNSUPPORTED_FUNCTION, E_INVALID_RADIX,
    E_UNTERMINATED_BLOCK, E_EMPTY_BLOCK,
)

# ============================================================================
# Radix Table and Literals
# ============================================================================

from .radix import (
    MIN_RADIX, MAX_RADIX, DEFAULT_RADIX,
    radix_of_prefix, radix_of_name, strip_radix_prefix, validate_radix,
)
from .numeric_literal import parse_literal

# ============================================================================
# Expansion Engine
# ============================================================================

from .expansion import (
    to_radix_string, floor_rational, power,
    continued_fraction, fold_continued_fraction, digit_expansion,
)

# ============================================================================
# Evaluation
# ============================================================================

from .sequencer import Judgement, judge_termination
from .evaluator import Evaluator
from .interpreter import Interpreter, execute, read_to_string, logical_name, SOURCE_SUFFIX

# ============================================================================
# Presentation
# ============================================================================

from .summary import (
    format_fraction, format_continued_fraction, format_digit_expansion,
    summary_lines, prompt, ConsoleReporter,
)

# ============================================================================
# Exports
# ============================================================================

__all__ = [
    # Version
    '__version__',

    # Errors
    'PeriodiCodeError', 'LiteralError', 'LoadError',
    'PeriodiCodeFatal', 'AssertionFailed', 'UnsupportedFunction', 'InvalidRadix', 'BlockError',
    'E_PARSE_ERROR', 'E_LITERAL_ERROR', 'E_SYNTAX_ERROR', 'E_REMAINING_INPUT',
    'E_DIVISION_BY_ZERO', 'E_LOAD_ERROR',
    'E_ASSERTION_FAILED', 'E_UNSUPPORTED_FUNCTION', 'E_INVALID_RADIX',
    'E_UNTERMINATED_BLOCK', 'E_EMPTY_BLOCK',

    # Radix table and literals
    'MIN_RADIX', 'MAX_RADIX', 'DEFAULT_RADIX',
    'radix_of_prefix', 'radix_of_name', 'strip_radix_prefix', 'validate_radix',
    'parse_literal',

    # Expansion engine
    'to_radix_string', 'floor_rational', 'power',
    'continued_fraction', 'fold_continued_fraction', 'digit_expansion',

    # Evaluation
    'Judgement', 'judge_termination', 'Evaluator',
    'Interpreter', 'execute', 'read_to_string', 'logical_name', 'SOURCE_SUFFIX',

    # Presentation
    'format_fraction', 'format_continued_fraction', 'format_digit_expansion',
    'summary_lines', 'prompt', 'ConsoleReporter',
]
