"""
Result Presentation

Renders an evaluated value in the three forms the calculator shows:

    frac: 3/7
    cont: [0; 2, 3]
    digt: 0.r428571

When the radix is not ten, each line also carries the decimal rendering
as a trailing comment that is itself valid input:

    frac: 3/7 # @decimal { 3/7 }
"""

import sys
from fractions import Fraction
from typing import List, Sequence

from colorama import Fore, Style
from colorama.ansi import code_to_chars

from .expansion import continued_fraction, digit_expansion, to_radix_string

PROGRAM_NAME = 'PeriodiCode'

# SGR 4; colorama.Style has no underline
UNDERLINE = code_to_chars(4)


def format_fraction(x: Fraction, radix: int) -> str:
    """`numer` or `numer/denom`, both in radix"""
    numer = to_radix_string(x.numerator, radix)
    if x.denominator == 1:
        return numer
    return f"{numer}/{to_radix_string(x.denominator, radix)}"


def format_continued_fraction(x: Fraction, radix: int) -> str:
    """`[a0]` or `[a0; a1, a2, ...]`, terms in radix"""
    terms = [to_radix_string(t, radix) for t in continued_fraction(x)]
    if len(terms) == 1:
        return f"[{terms[0]}]"
    return f"[{terms[0]}; {', '.join(terms[1:])}]"


def format_digit_expansion(x: Fraction, radix: int) -> str:
    """Positional expansion with `r` before the repeating digits"""
    return digit_expansion(x, radix)


FORMATS = (
    ('frac', format_fraction),
    ('cont', format_continued_fraction),
    ('digt', format_digit_expansion),
)


def summary_lines(x: Fraction, radix: int, color: bool = True) -> List[str]:
    """
    Render x as the `frac:`, `cont:` and `digt:` lines.

    Args:
        x: Value to render
        radix: Radix context the value was produced in
        color: Emit ANSI colour codes

    Returns:
        Three lines, without trailing newlines
    """
    lines = []
    for label, fmt in FORMATS:
        line = f"{label}: {fmt(x, radix)}"
        if radix != 10:
            comment = f"# @decimal {{ {fmt(x, 10)} }}"
            if color:
                comment = f"{Style.DIM}{Fore.GREEN}{comment}{Style.RESET_ALL}"
            line = f"{line} {comment}"
        lines.append(line)
    return lines


def prompt(stack_trace: Sequence[str], radix: int, line: str, color: bool = True) -> str:
    """
    Echo line shown before a line executes, e.g. `PeriodiCode:lib:base-10> 1+1`.

    The radix is shown bold and underlined whenever it is not ten.
    """
    if not color:
        trace = ''.join(f"{name}:" for name in stack_trace)
        return f"{PROGRAM_NAME}:{trace}base-{radix:<2}> {line}"

    trace = ''.join(f"{Fore.BLUE}{name}{Style.RESET_ALL}:" for name in stack_trace)
    emphasis = Style.NORMAL if radix == 10 else Style.BRIGHT + UNDERLINE
    return (
        f"{Style.BRIGHT}{Fore.BLUE}{PROGRAM_NAME}{Style.RESET_ALL}:{trace}"
        f"{emphasis}{Fore.GREEN}base-{radix:<2}{Style.RESET_ALL}> {line}"
    )


class ConsoleReporter:
    """
    Interpreter reporter that prints the echo prompt and value summaries.

    With echo=False, top-level lines are not echoed (the REPL has already
    shown them); lines of included files always are.
    """

    def __init__(self, stream=None, color: bool = True, echo: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.color = color
        self.echo = echo

    def on_line(self, stack_trace: Sequence[str], radix: int, line: str):
        if self.echo or stack_trace:
            print(prompt(stack_trace, radix, line, color=self.color), file=self.stream)

    def on_value(self, value: Fraction, radix: int):
        for line in summary_lines(value, radix, color=self.color):
            print(line, file=self.stream)


__all__ = [
    'PROGRAM_NAME', 'UNDERLINE', 'format_fraction', 'format_continued_fraction',
    'format_digit_expansion', 'summary_lines', 'prompt', 'ConsoleReporter',
]
