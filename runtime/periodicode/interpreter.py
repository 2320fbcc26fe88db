"""
PeriodiCode Interpreter

Owns the state that survives between statements (`previous_value`, the
`$_` accumulator, and `radix_context`) and drives the Evaluator over a
line, one statement at a time:

    interp = Interpreter()
    interp.execute_line('1/7; $_ * 7')     # -> Fraction(1, 1)
    interp.execute_line('@set_radix(@hex); ff')

Each statement runs on a fresh Evaluator seeded with copies of the
state; the state is committed only once the statement has evaluated, so
a recoverable error never leaves half-applied changes behind.

`@load { "path" }` runs the file in a nested Interpreter that inherits
the current state, extends the stack trace by the file's logical name,
and hands its final state back to the caller.
"""

import logging
from fractions import Fraction
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple

from .errors import (
    PeriodiCodeError, PeriodiCodeFatal, LoadError,
    E_REMAINING_INPUT, with_stack_trace,
)
from .evaluator import Evaluator
from .radix import DEFAULT_RADIX, validate_radix
from .sequencer import Judgement, judge_termination

logger = logging.getLogger("periodicode.interpreter")

SOURCE_SUFFIX = '.periodicode'


def read_to_string(path: str) -> str:
    """Default file reader used by @load"""
    return Path(path).read_text(encoding='utf-8')


def logical_name(path: str) -> str:
    """Stack-trace entry for an included file: its name without the source suffix"""
    name = Path(path).name
    if name.endswith(SOURCE_SUFFIX) and len(name) > len(SOURCE_SUFFIX):
        return name[:-len(SOURCE_SUFFIX)]
    return name


class Interpreter:
    """Line-oriented PeriodiCode interpreter"""

    def __init__(
        self,
        previous_value: Fraction = Fraction(0),
        radix_context: int = DEFAULT_RADIX,
        stack_trace: Sequence[str] = (),
        reader: Callable[[str], str] = read_to_string,
        reporter=None,
    ):
        """
        Args:
            previous_value: Initial value of `$_`
            radix_context: Initial ambient radix, in [2, 25]
            stack_trace: Logical names of the files being included, outermost first
            reader: Callable returning a file's contents; may raise OSError
            reporter: Optional object with on_line(stack_trace, radix, line)
                and on_value(value, radix), shared with nested interpreters

        Raises:
            InvalidRadix: If radix_context is out of range
        """
        self.previous_value = Fraction(previous_value)
        self.radix_context = validate_radix(radix_context)
        self.stack_trace: Tuple[str, ...] = tuple(stack_trace)
        self.reader = reader
        self.reporter = reporter

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute_line(self, line: str) -> Optional[Fraction]:
        """
        Execute one line: statements separated by `;`, an optional trailing
        expression and an optional `#` comment.

        Args:
            line: Source line (no line breaks)

        Returns:
            Value of the trailing expression, or None if the line ends with
            `;` or has no statements

        Raises:
            PeriodiCodeError: On a grammar error; statements before it stay committed
            PeriodiCodeFatal: On a failed assertion or other fatal condition
        """
        logger.debug("%s base-%d> %s", self._trace_label(), self.radix_context, line)
        if self.reporter is not None:
            self.reporter.on_line(self.stack_trace, self.radix_context, line)

        try:
            return self._execute_statements(line)
        except (PeriodiCodeError, PeriodiCodeFatal) as e:
            raise with_stack_trace(e, self.stack_trace)

    def _execute_statements(self, line: str) -> Optional[Fraction]:
        judgement, remaining = judge_termination(line)
        if judgement in (Judgement.END_OF_LINE, Judgement.TERMINATED):
            return None

        while True:
            evaluator = Evaluator(
                self.radix_context, self.previous_value, remaining, loader=self._load,
            )
            value = evaluator.parse_expression()
            self.previous_value = value
            self.radix_context = evaluator.radix_context

            judgement, remaining = judge_termination(evaluator.remaining)
            if judgement == Judgement.END_OF_LINE:
                if self.reporter is not None:
                    self.reporter.on_value(self.previous_value, self.radix_context)
                return self.previous_value
            if judgement == Judgement.TERMINATED:
                return None
            if judgement == Judgement.NO_CONSUMPTION:
                raise PeriodiCodeError(
                    E_REMAINING_INPUT, f"cannot parse the remaining `{remaining}`",
                )

    def execute_lines(self, source: str) -> Tuple[Fraction, int]:
        """
        Execute every line of source in order. Lines end at `\\n` or `\\r\\n`
        only; other Unicode line separators stay inside the line.

        Returns:
            Final (previous_value, radix_context)
        """
        lines = source.split('\n')
        if lines[-1] == '':
            lines.pop()
        for line in lines:
            if line.endswith('\r'):
                line = line[:-1]
            self.execute_line(line)
        return self.previous_value, self.radix_context

    def execute_file(self, path: str) -> Tuple[Fraction, int]:
        """Read path with this interpreter's reader and execute it"""
        return self.execute_lines(self._read(path))

    # ------------------------------------------------------------------
    # File inclusion
    # ------------------------------------------------------------------

    def _read(self, path: str) -> str:
        try:
            return self.reader(path)
        except FileNotFoundError:
            raise LoadError(path, "file not found") from None
        except OSError as e:
            raise LoadError(path, e.strerror or str(e)) from e

    def _load(self, path: str, previous_value: Fraction, radix_context: int) -> Tuple[Fraction, int]:
        """Run a file in a nested interpreter that inherits and returns state"""
        source = self._read(path)
        child = Interpreter(
            previous_value=previous_value,
            radix_context=radix_context,
            stack_trace=self.stack_trace + (logical_name(path),),
            reader=self.reader,
            reporter=self.reporter,
        )
        logger.debug(
            "loading %s (stack trace %s, radix %d)",
            path, child._trace_label(), radix_context,
        )
        return child.execute_lines(source)

    def _trace_label(self) -> str:
        return ''.join(f"{name}:" for name in self.stack_trace)


def execute(source: str, radix_context: int = DEFAULT_RADIX) -> Fraction:
    """
    Execute PeriodiCode source and return the final `$_` (convenience function)

    Example:
        >>> execute('[0; 2, 3]')
        Fraction(3, 7)
        >>> execute('@hex { ff }')
        Fraction(255, 1)
    """
    interpreter = Interpreter(radix_context=radix_context)
    value, _ = interpreter.execute_lines(source)
    return value


__all__ = [
    'Interpreter', 'execute', 'read_to_string', 'logical_name', 'SOURCE_SUFFIX',
]
