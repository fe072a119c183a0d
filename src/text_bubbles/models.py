from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class InvalidConfig(ValueError):
    """Raised when a sizing configuration cannot produce bubble sizes."""


class TokenKind(str, Enum):
    WORD = "word"
    BREAK = "break"
    FILLER = "filler"


class ScaleLaw(str, Enum):
    """Relationship between a token's length and its bubble size."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    CUBIC = "cubic"

    @classmethod
    def parse(cls, value: "ScaleLaw | str | None") -> "ScaleLaw":
        """Resolve a law by name; unknown names fall back to LINEAR."""
        if isinstance(value, ScaleLaw):
            return value
        normalized = str(value or "").lower().strip()
        for law in cls:
            if law.value == normalized:
                return law
        return cls.LINEAR


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class Token:
    """A unit produced by the tokenizer with its letter and digit counts."""

    text: str
    kind: TokenKind
    alphanum_length: int
    letter_length: int

    @property
    def label(self) -> str:
        """Display label in the form ``[n] text``."""
        return f"[{self.alphanum_length}] {self.text.strip()}"


@dataclass(slots=True)
class SizeConfig:
    """Caller-owned sizing settings passed into every size computation."""

    law: ScaleLaw = ScaleLaw.LINEAR
    scale: float = 5.0
    spacing: float = 1.0

    def validate(self) -> "SizeConfig":
        validate_scale(self.scale)
        if not _is_finite_number(self.spacing) or self.spacing < 0:
            raise InvalidConfig(
                f"spacing must be a non-negative number, got {self.spacing!r}"
            )
        return self


@dataclass(frozen=True, slots=True)
class SizedToken:
    """A token paired with its bubble size (None for fillers and breaks)."""

    token: Token
    size: float | None


@dataclass(frozen=True, slots=True)
class Stats:
    """Aggregate counters for a single tokenization pass."""

    token_count: int = 0
    word_count: int = 0
    char_count: int = 0
    alphanum_count: int = 0
    letter_count: int = 0
    average_word_length: float = 0.0
    longest_word: Token | None = None


@dataclass(slots=True)
class BubbleReport:
    """Sized tokens and statistics computed for one document."""

    doc_id: str
    bubbles: list[SizedToken]
    stats: Stats | None


def validate_scale(scale: object) -> None:
    """Raise InvalidConfig unless scale is a finite number above zero."""
    if not _is_finite_number(scale) or scale <= 0:  # type: ignore[operator]
        raise InvalidConfig(f"scale must be a positive number, got {scale!r}")


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
