from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from .models import Stats, Token, TokenKind


def accumulate(tokens: Iterable[Token], source_text: str | None = None) -> Stats:
    """
    Fold a token sequence into aggregate statistics in a single pass.

    ``char_count`` uses ``source_text`` when given so that line-break
    normalization does not change the reported length of the input.
    """
    token_count = 0
    word_count = 0
    token_chars = 0
    alphanum_count = 0
    letter_count = 0
    longest: Token | None = None

    for token in tokens:
        token_chars += len(token.text)
        if token.kind is not TokenKind.BREAK:
            token_count += 1
        if token.letter_length > 0:
            word_count += 1
        alphanum_count += token.alphanum_length
        letter_count += token.letter_length
        best = longest.alphanum_length if longest is not None else 0
        if token.alphanum_length > best:
            longest = token

    average = _average(alphanum_count, token_count) if alphanum_count else 0.0
    return Stats(
        token_count=token_count,
        word_count=word_count,
        char_count=len(source_text) if source_text is not None else token_chars,
        alphanum_count=alphanum_count,
        letter_count=letter_count,
        average_word_length=average,
        longest_word=longest,
    )


def _average(total: int, count: int) -> float:
    """Mean rounded to one decimal place, halves rounding up."""
    mean = Decimal(total) / Decimal(count)
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
