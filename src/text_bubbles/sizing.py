from __future__ import annotations

import math
from typing import Dict

from .models import (
    ScaleLaw,
    SizeConfig,
    SizedToken,
    Token,
    TokenKind,
    validate_scale,
)

# Words of BASE_LEN alphanumerics get the same bubble under every law.
BASE_LEN = 8

# Display-unit divisor applied after scaling.
NORMALIZATION_DIVISOR = 4.0

NORMALIZATION: Dict[ScaleLaw, float] = {
    ScaleLaw.LINEAR: 1.0,
    ScaleLaw.QUADRATIC: math.sqrt(BASE_LEN),
    ScaleLaw.CUBIC: BASE_LEN ** (2 / 3),
}


def size(alphanum_length: int, config: SizeConfig) -> float:
    """
    Compute the bubble size for a token with ``alphanum_length`` letters and digits.

    Raises InvalidConfig when ``config.scale`` is not a positive number.
    """
    validate_scale(config.scale)
    if alphanum_length < 0:
        raise ValueError(f"alphanum_length must be >= 0, got {alphanum_length}")

    law = ScaleLaw.parse(config.law)
    raw = _raw_size(alphanum_length, law)
    return raw * NORMALIZATION[law] * config.scale / NORMALIZATION_DIVISOR


def size_token(token: Token, config: SizeConfig) -> SizedToken:
    """Size Word tokens; fillers and breaks carry no size."""
    if token.kind is not TokenKind.WORD:
        return SizedToken(token=token, size=None)
    return SizedToken(token=token, size=size(token.alphanum_length, config))


def _raw_size(n: int, law: ScaleLaw) -> float:
    if law is ScaleLaw.QUADRATIC:
        return math.sqrt(n)
    if law is ScaleLaw.CUBIC:
        return n ** (1 / 3)
    return float(n)
