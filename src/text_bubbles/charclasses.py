from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

CodeRange = Tuple[int, int]

# Extended alphabet ranges counted as letters alongside ASCII a-z / A-Z.
EXTENDED_LETTER_RANGES: tuple[CodeRange, ...] = (
    (0x00AD, 0x00AD),  # soft hyphen
    # Extended Latin
    (0x00C0, 0x00D6),
    (0x00D8, 0x00F6),
    (0x00F8, 0x01BF),
    (0x01C4, 0x02AF),
    # Greek and Cyrillic
    (0x0370, 0x0373),
    (0x0376, 0x0377),
    (0x037B, 0x037D),
    (0x0386, 0x0386),
    (0x0388, 0x038A),
    (0x038C, 0x038C),
    (0x038E, 0x03A1),
    (0x03A3, 0x0481),
    (0x048A, 0x0527),
    # Armenian
    (0x0531, 0x0556),
    (0x0561, 0x0587),
    # Hebrew
    (0x05D0, 0x05EA),
    (0x05F0, 0x05F2),
    # Arabic
    (0x0620, 0x064A),
    (0x0660, 0x0669),
    (0x066D, 0x06D3),
    (0x06F0, 0x06FC),
    # Syriac, Thaana, NKo, Samaritan
    (0x0710, 0x072F),
    (0x074D, 0x07A5),
    (0x07C0, 0x07EA),
    (0x0800, 0x0815),
    # Mandaic and Arabic Extended
    (0x0840, 0x0858),
    (0x08A0, 0x08B2),
    # Devanagari
    (0x0904, 0x0939),
    (0x0958, 0x0961),
    (0x0966, 0x096F),
    (0x0972, 0x097F),
    # Bengali
    (0x0985, 0x098C),
    (0x098F, 0x0990),
    (0x0993, 0x09A8),
    (0x09AA, 0x09B0),
    (0x09B2, 0x09B2),
    (0x09B6, 0x09B9),
    (0x09DC, 0x09E1),
    (0x09E6, 0x09F1),
)

ASCII_LETTER_RANGES: tuple[CodeRange, ...] = (
    (ord("A"), ord("Z")),
    (ord("a"), ord("z")),
)

ASCII_DIGIT_RANGES: tuple[CodeRange, ...] = ((ord("0"), ord("9")),)

# Joins contractions such as "don't" and "Bob’s" without counting as a letter.
APOSTROPHES = "'’"


@dataclass(frozen=True, slots=True)
class CharacterClass:
    """A named, immutable set of code points expressed as inclusive ranges."""

    name: str
    ranges: tuple[CodeRange, ...]

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str) or len(char) != 1:
            return False
        code = ord(char)
        return any(start <= code <= end for start, end in self.ranges)

    def pattern(self) -> str:
        """Return the body of a regex character class matching this set."""
        parts: list[str] = []
        for start, end in self.ranges:
            if start == end:
                parts.append(re.escape(chr(start)))
            else:
                parts.append(f"{re.escape(chr(start))}-{re.escape(chr(end))}")
        return "".join(parts)

    def count(self, text: str) -> int:
        """Count the characters of text that belong to this class."""
        return sum(1 for char in text if char in self)


LETTER = CharacterClass("Letter", ASCII_LETTER_RANGES + EXTENDED_LETTER_RANGES)
DIGIT = CharacterClass("Digit", ASCII_DIGIT_RANGES)


def count_alphanumerics(text: str) -> int:
    """Count characters that are letters or digits."""
    return sum(1 for char in text if char in LETTER or char in DIGIT)


def count_letters(text: str) -> int:
    return LETTER.count(text)
