from __future__ import annotations

import re
from typing import Iterable, List

from .charclasses import (
    APOSTROPHES,
    DIGIT,
    LETTER,
    count_alphanumerics,
    count_letters,
)
from .models import Token, TokenKind

BREAK_MARKER = "\n"
LINE_BREAK_RE = re.compile(r"\r\n|[\r\n\v\f]")

_L = LETTER.pattern()
_D = DIGIT.pattern()
_W = _L + _D + re.escape(APOSTROPHES)

# Zero-width split points; every character of the line survives the split.
BOUNDARY_RE = re.compile(
    # word end not continued by a hyphen, period or comma
    rf"(?<=[{_W}])(?=[^{_W}\-.,])"
    # word start on an apostrophe (other word starts are never split)
    rf"|(?<=[^{_W}])(?=[{re.escape(APOSTROPHES)}])"
    # word followed by a hyphenated number: "10-20" -> "10", "-20"
    rf"|(?<=[{_W}])(?=-[{_D}])"
    # word followed by a period or comma that is not a decimal separator
    rf"|(?<=[{_W}])(?=[.,](?![{_D}]))"
    # bare hyphen
    rf"|(?=-(?![{_L}{_D}]))"
    r"|(?=[\s\x00_])"
)


def normalize_breaks(text: str) -> str:
    """Collapse \\r\\n, \\r, \\v and \\f into the canonical newline marker."""
    return LINE_BREAK_RE.sub(BREAK_MARKER, text)


def tokenize(text: str) -> List[Token]:
    """Split text into Word, Filler and Break tokens without dropping characters."""
    tokens: List[Token] = []
    for index, line in enumerate(normalize_breaks(text).split(BREAK_MARKER)):
        if index:
            tokens.append(Token(BREAK_MARKER, TokenKind.BREAK, 0, 0))
        tokens.extend(_classify(piece) for piece in split_line(line))
    return tokens


def split_line(line: str) -> List[str]:
    """Split a single line (no break markers) into token texts."""
    return [piece for piece in BOUNDARY_RE.split(line) if piece]


def detokenize(tokens: Iterable[Token]) -> str:
    """Join token texts back into the break-normalized source text."""
    return "".join(token.text for token in tokens)


def _classify(piece: str) -> Token:
    alphanum_length = count_alphanumerics(piece)
    kind = TokenKind.WORD if alphanum_length else TokenKind.FILLER
    return Token(
        text=piece,
        kind=kind,
        alphanum_length=alphanum_length,
        letter_length=count_letters(piece),
    )
