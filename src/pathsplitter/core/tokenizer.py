"""Lexical scanner for path data.

Scans raw path-data text into an ordered sequence of tokens. A token is
either a single ASCII letter (a command) or a signed decimal number with
optional fraction and exponent. Anything else (whitespace, commas, stray
signs) acts as a separator and is skipped.

The scanner is a small hand-written state machine rather than a regular
expression so that the number grammar is explicit:

    number   := sign? (digits ('.' digits)? | '.' digits) exponent?
    exponent := ('e' | 'E') sign? digits

An exponent marker is only consumed when at least one digit follows it;
otherwise the 'e' is scanned as a command letter on its own.
"""

import string
from dataclasses import dataclass, field
from enum import Enum, auto

from pathsplitter.domain import Token

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_SIGNS = frozenset("+-")


class ScanStatus(Enum):
    """Outcome of a scan.

    - OK: At least one token was found
    - EMPTY: No tokens were found; the input is not decomposable
    """

    OK = auto()
    EMPTY = auto()


@dataclass
class ScanResult:
    """Result of scanning path data.

    Attributes:
        tokens: Tokens in source order
        skipped: Number of characters skipped as separators
    """

    tokens: list[Token] = field(default_factory=list)
    skipped: int = 0

    @property
    def status(self) -> ScanStatus:
        return ScanStatus.OK if self.tokens else ScanStatus.EMPTY

    def is_empty(self) -> bool:
        """Check if the scan produced no tokens."""
        return not self.tokens


def _skip_digits(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    return pos


def match_number(text: str, start: int) -> int:
    """Match a numeric literal starting at a position.

    Args:
        text: Source text
        start: Index to start matching at

    Returns:
        Index just past the literal, or start if no number begins here
    """
    n = len(text)
    pos = start

    if pos < n and text[pos] in _SIGNS:
        pos += 1

    int_end = _skip_digits(text, pos)
    has_int = int_end > pos
    pos = int_end

    # Fraction needs at least one digit after the dot
    if pos + 1 < n and text[pos] == "." and text[pos + 1] in _DIGITS:
        pos = _skip_digits(text, pos + 1)
    elif not has_int:
        return start

    if pos < n and text[pos] in "eE":
        exp = pos + 1
        if exp < n and text[exp] in _SIGNS:
            exp += 1
        exp_end = _skip_digits(text, exp)
        if exp_end > exp:
            pos = exp_end

    return pos


def scan(text: str) -> ScanResult:
    """Scan path data into tokens.

    Args:
        text: Raw path-data string

    Returns:
        ScanResult with the tokens found and the count of skipped characters

    Examples:
        >>> [t.text for t in scan("M10,20l-5.5e1.5").tokens]
        ['M', '10', '20', 'l', '-5.5e1', '.5']
    """
    result = ScanResult()
    pos = 0
    n = len(text)

    while pos < n:
        char = text[pos]

        if char in _LETTERS:
            result.tokens.append(Token.command(char))
            pos += 1
            continue

        end = match_number(text, pos)
        if end > pos:
            result.tokens.append(Token.number(text[pos:end]))
            pos = end
        else:
            result.skipped += 1
            pos += 1

    return result


def tokenize(text: str) -> list[Token]:
    """Scan path data and return only the token list."""
    return scan(text).tokens
