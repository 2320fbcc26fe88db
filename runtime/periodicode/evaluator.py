"""
Expression Evaluator

Recursive-descent parser that evaluates while it parses: every production
returns an exact Fraction and advances the cursor. There is no AST.

Grammar (precedence low to high):
    expression     := additive
    additive       := multiplicative (('+' | '-') multiplicative)*
    multiplicative := unary (('*' | '/') unary)*
    unary          := ('+' | '-') unary | directive
    directive      := '@' identifier ... | primary
    primary        := '$_'
                    | '(' expression ')'
                    | '[' expression (';' expression (',' expression)*)? ']'
                    | block
                    | numeric literal
    block          := '{' ';'* expression (';'+ expression)* ';'* '}'

Directives:
    @<radix name> { ... }   evaluate a block in another radix, then restore it
    @set_radix(@<name>)     change the radix for the rest of the scope
    @assert_eq(a, b)        fatal unless a == b; yields the value
    @load { "path" }        run a file in a nested interpreter
    @load_dirty { "path" }  same as @load

State: `radix_context` and `previous_value`, both read and written by the
productions above.
"""

import logging
import re
from fractions import Fraction
from typing import Callable, Optional, Tuple

from .errors import (
    PeriodiCodeError, AssertionFailed, UnsupportedFunction, BlockError,
    E_PARSE_ERROR, E_SYNTAX_ERROR, E_DIVISION_BY_ZERO, E_LOAD_ERROR,
    E_UNTERMINATED_BLOCK, E_EMPTY_BLOCK,
)
from .expansion import fold_continued_fraction
from .numeric_literal import parse_literal
from .radix import radix_of_name, validate_radix
from .sequencer import is_end_of_line

logger = logging.getLogger("periodicode.evaluator")

IDENTIFIER = re.compile(r"[0-9a-zA-Z_]+")

# (path, previous_value, radix_context) -> (previous_value, radix_context)
Loader = Callable[[str, Fraction, int], Tuple[Fraction, int]]


class Evaluator:
    """Parse and evaluate expressions over one line of input"""

    def __init__(
        self,
        radix_context: int,
        previous_value: Fraction,
        text: str,
        loader: Optional[Loader] = None,
    ):
        self.radix_context = validate_radix(radix_context)
        self.previous_value = Fraction(previous_value)
        self.text = text
        self.pos = 0
        self.loader = loader

    @property
    def remaining(self) -> str:
        """Unconsumed input"""
        return self.text[self.pos:]

    def parse_expression(self) -> Fraction:
        """Parse and evaluate one expression starting at the cursor"""
        self._skip_whitespace()
        return self._parse_additive()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _parse_additive(self) -> Fraction:
        value = self._parse_multiplicative()
        while True:
            if self._match('+'):
                value = value + self._parse_multiplicative()
            elif self._match('-'):
                value = value - self._parse_multiplicative()
            else:
                return value

    def _parse_multiplicative(self) -> Fraction:
        value = self._parse_unary()
        while True:
            if self._match('*'):
                value = value * self._parse_unary()
            elif self._match('/'):
                divisor = self._parse_unary()
                if divisor == 0:
                    raise PeriodiCodeError(E_DIVISION_BY_ZERO, "Division by zero")
                value = value / divisor
            else:
                return value

    def _parse_unary(self) -> Fraction:
        if self._match('+'):
            return self._parse_unary()
        if self._match('-'):
            return -self._parse_unary()
        return self._parse_directive()

    # ------------------------------------------------------------------
    # Directives
    # ------------------------------------------------------------------

    def _parse_directive(self) -> Fraction:
        if not self._match('@'):
            return self._parse_primary()

        self._skip_whitespace()
        name = self._parse_identifier()

        radix = radix_of_name(name)
        if radix is not None:
            return self._eval_radix_block(name, radix)
        if name == 'assert_eq':
            return self._eval_assert_eq()
        if name == 'set_radix':
            return self._eval_set_radix()
        if name in ('load', 'load_dirty'):
            return self._eval_load(name)
        raise UnsupportedFunction(name)

    def _eval_radix_block(self, name: str, radix: int) -> Fraction:
        """@<radix name> { ... }"""
        saved = self.radix_context
        logger.debug("entering @%s block (radix %d -> %d)", name, saved, radix)
        self.radix_context = radix
        try:
            self._expect('{', f"Expected a block `{{ ... }}` after `@{name}`")
            return self._parse_block_body()
        finally:
            self.radix_context = saved
            logger.debug("leaving @%s block (radix restored to %d)", name, saved)

    def _eval_assert_eq(self) -> Fraction:
        """@assert_eq(a, b)"""
        self._expect('(', "No parenthesis after the built-in function `assert_eq`")
        first = self.parse_expression()
        self._expect(',', "The built-in function `assert_eq` expects exactly two arguments")
        second = self.parse_expression()
        self._expect(')', "The built-in function `assert_eq` expects exactly two arguments")
        if first != second:
            raise AssertionFailed(first, second)
        # @assert_eq(7*6, 42) yields 42
        return first

    def _eval_set_radix(self) -> Fraction:
        """@set_radix(@<radix name>)"""
        self._expect('(', "No parenthesis after the built-in function `set_radix`")
        self._expect('@', "No radix argument found in the built-in function `set_radix`")
        self._skip_whitespace()
        name = self._parse_identifier()
        radix = radix_of_name(name)
        if radix is None:
            raise PeriodiCodeError(E_SYNTAX_ERROR, f"Unrecognizable radix name found: `{name}`")
        self._expect(')', "The built-in function `set_radix` expects exactly one argument")
        logger.debug("set_radix: %d -> %d", self.radix_context, radix)
        self.radix_context = radix
        return Fraction(radix)

    def _eval_load(self, name: str) -> Fraction:
        """@load { "path" } and @load_dirty { "path" }"""
        self._expect('{', f"Expected `{{ \"path\" }}` after `@{name}`")
        path = self._parse_string()
        self._expect('}', f"Expected `}}` after the path given to `@{name}`")
        if self.loader is None:
            raise PeriodiCodeError(E_LOAD_ERROR, f"`@{name}` is not available here")
        self.previous_value, self.radix_context = self.loader(
            path, self.previous_value, self.radix_context,
        )
        return self.previous_value

    # ------------------------------------------------------------------
    # Primary expressions
    # ------------------------------------------------------------------

    def _parse_primary(self) -> Fraction:
        self._skip_whitespace()

        if self._match('$_'):
            return self.previous_value

        if self._match('('):
            value = self.parse_expression()
            self._expect(')', "Mismatched parenthesis")
            return value

        if self._match('['):
            return self._parse_continued_fraction()

        if self._match('{'):
            return self._parse_block_body()

        value, rest = parse_literal(self.remaining, self.radix_context)
        self.pos = len(self.text) - len(rest)
        return value

    def _parse_continued_fraction(self) -> Fraction:
        """Bracketed continued fraction `[a0; a1, a2, ...]`, after the `[`"""
        first = self.parse_expression()
        if self._match(']'):
            return first
        if not self._match(';'):
            raise PeriodiCodeError(
                E_PARSE_ERROR,
                "Expected `]` or `;` after the first slot of a continued-fraction literal",
            )

        terms = [first]
        while True:
            terms.append(self.parse_expression())
            if self._match(']'):
                break
            if not self._match(','):
                raise PeriodiCodeError(E_PARSE_ERROR, "Mismatched bracket")
            self._skip_whitespace()
            if self._peek() == ']':
                raise PeriodiCodeError(
                    E_PARSE_ERROR,
                    "Trailing comma is forbidden in a continued-fraction literal",
                )
        return fold_continued_fraction(terms)

    def _parse_block_body(self) -> Fraction:
        """Statements of a `{ ... }` block, after the `{`; yields the last value"""
        value = None
        self._skip_semicolons()
        while True:
            if is_end_of_line(self.remaining):
                raise BlockError(E_UNTERMINATED_BLOCK, "Unterminated block: expected `}`")
            if self._match('}'):
                if value is None:
                    raise BlockError(E_EMPTY_BLOCK, "A block must contain at least one expression")
                return value

            value = self.parse_expression()
            self.previous_value = value

            self._skip_whitespace()
            if self._peek() == ';':
                self._skip_semicolons()
            elif self._peek() != '}' and not is_end_of_line(self.remaining):
                raise PeriodiCodeError(
                    E_SYNTAX_ERROR,
                    f"Expected `;` or `}}` in a block, found `{self.remaining}`",
                )

    # ------------------------------------------------------------------
    # Lexical helpers
    # ------------------------------------------------------------------

    def _parse_identifier(self) -> str:
        match = IDENTIFIER.match(self.text, self.pos)
        if match is None:
            raise PeriodiCodeError(E_PARSE_ERROR, "No identifier found after `@`")
        self.pos = match.end()
        return match.group(0)

    def _parse_string(self) -> str:
        self._expect('"', "Expected a double-quoted path")
        end = self.text.find('"', self.pos)
        if end < 0:
            raise PeriodiCodeError(E_PARSE_ERROR, "Unterminated string literal")
        value = self.text[self.pos:end]
        self.pos = end + 1
        return value

    def _skip_whitespace(self):
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _skip_semicolons(self):
        self._skip_whitespace()
        while self._peek() == ';':
            self.pos += 1
            self._skip_whitespace()

    def _peek(self) -> str:
        return self.text[self.pos:self.pos + 1]

    def _match(self, token: str) -> bool:
        """Skip whitespace, then consume token if it comes next"""
        self._skip_whitespace()
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    def _expect(self, token: str, message: str):
        if not self._match(token):
            raise PeriodiCodeError(E_PARSE_ERROR, message)


__all__ = ['Evaluator', 'Loader', 'IDENTIFIER']
