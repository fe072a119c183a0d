from __future__ import annotations

import logging
from typing import Dict, List

from .config import BubbleConfig
from .models import BubbleReport, Document, SizedToken, TokenKind
from .sizing import size_token
from .stats import accumulate
from .tokenization import tokenize

LOGGER = logging.getLogger(__name__)


def process_text(text: str, config: BubbleConfig, doc_id: str = "text") -> BubbleReport:
    """Run one full tokenize -> size -> accumulate pass over text."""
    size_config = config.to_size_config()
    tokens = tokenize(text)
    bubbles: List[SizedToken] = [
        size_token(token, size_config)
        for token in tokens
        if config.show_breaks or token.kind is not TokenKind.BREAK
    ]
    stats = accumulate(tokens, source_text=text) if config.show_stats else None
    LOGGER.debug(
        "Processed %s: %d tokens, law=%s, scale=%s",
        doc_id,
        len(tokens),
        size_config.law.value,
        size_config.scale,
    )
    return BubbleReport(doc_id=doc_id, bubbles=bubbles, stats=stats)


def process_document(doc: Document, config: BubbleConfig) -> BubbleReport:
    return process_text(doc.text, config, doc_id=doc.doc_id)


def process_corpus(
    documents: List[Document], config: BubbleConfig
) -> Dict[str, BubbleReport]:
    """Process all documents and return the per-document reports."""
    results: Dict[str, BubbleReport] = {}
    for document in documents:
        results[document.doc_id] = process_document(document, config)
    return results
