"""
Statement Sequencing

How a line (or the inside of a `{ ... }` block) splits into statements:

- a run of `;`, with or without whitespace in between, is one boundary
- end of input, or a `#` comment, after a boundary ends the line with
  nothing surfaced
- an expression followed directly by end of input or a comment is the
  line's trailing expression, and its value is surfaced
"""

from typing import Tuple


class Judgement:
    """What follows a statement"""
    # The expression ran up to end of line / comment: its value surfaces
    END_OF_LINE = "END_OF_LINE"
    # Semicolon(s), then end of line / comment: nothing surfaces
    TERMINATED = "TERMINATED"
    # Semicolon(s), then more input to parse
    NEXT_STATEMENT = "NEXT_STATEMENT"
    # Neither empty nor a semicolon: the caller cannot continue
    NO_CONSUMPTION = "NO_CONSUMPTION"


def is_end_of_line(text: str) -> bool:
    """True when text is empty or starts a comment"""
    return not text or text.startswith('#')


def skip_semicolons(text: str) -> str:
    """Drop leading whitespace and any run of semicolons"""
    remaining = text.lstrip()
    while remaining.startswith(';'):
        remaining = remaining[1:].lstrip()
    return remaining


def judge_termination(text: str) -> Tuple[str, str]:
    """
    Classify the input that follows a statement.

    Args:
        text: Unconsumed input after an expression (or at the start of a line)

    Returns:
        (Judgement constant, remaining input for the next statement)

    Example:
        >>> judge_termination('  ;; 2')
        ('NEXT_STATEMENT', '2')
        >>> judge_termination(' # done')
        ('END_OF_LINE', '# done')
    """
    text = text.lstrip()
    if is_end_of_line(text):
        return Judgement.END_OF_LINE, text
    if text.startswith(';'):
        remaining = skip_semicolons(text)
        if is_end_of_line(remaining):
            return Judgement.TERMINATED, remaining
        return Judgement.NEXT_STATEMENT, remaining
    return Judgement.NO_CONSUMPTION, text


__all__ = ['Judgement', 'is_end_of_line', 'skip_semicolons', 'judge_termination']
