"""
text_bubbles package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import BubbleConfig, config_from_dict, config_from_yaml, load_config
from .models import InvalidConfig, ScaleLaw, SizeConfig, Stats, Token, TokenKind
from .pipeline import process_corpus, process_text
from .sizing import size
from .stats import accumulate
from .tokenization import tokenize

__all__ = [
    "BubbleConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "InvalidConfig",
    "ScaleLaw",
    "SizeConfig",
    "Stats",
    "Token",
    "TokenKind",
    "tokenize",
    "size",
    "accumulate",
    "process_text",
    "process_corpus",
]

__version__ = "0.1.0"
