"""Incremental TF-IDF index and cosine similarity."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from math import log, sqrt

from loguru import logger

from thought_radar.engine.tokenizer import tokenize
from thought_radar.types import Vector


def compute_term_frequency(tokens: Sequence[str]) -> Vector:
    """Return ``count(token) / len(tokens)`` per distinct token."""
    total = len(tokens)
    if total == 0:
        return {}
    return {token: count / total for token, count in Counter(tokens).items()}


def cosine_similarity(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """Exact cosine similarity of two sparse vectors.

    Returns 0.0 when either vector has no weight at all, e.g. a post made only
    of stop-words.
    """

    dot = 0.0
    magnitude_a = 0.0
    magnitude_b = 0.0
    for term in a.keys() | b.keys():
        weight_a = a.get(term, 0.0)
        weight_b = b.get(term, 0.0)
        dot += weight_a * weight_b
        magnitude_a += weight_a * weight_a
        magnitude_b += weight_b * weight_b

    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0
    return dot / (sqrt(magnitude_a) * sqrt(magnitude_b))


class SimilarityEngine:
    """Owns the session corpus and its document-frequency table.

    Vectors are computed once, when a document is added, against the table as
    it stands right after that document was counted. Earlier vectors are never
    refreshed as the corpus grows, so older documents keep the weights they had
    at submission time.
    """

    def __init__(self) -> None:
        self._documents: list[tuple[str, ...]] = []
        self._document_frequency: Counter[str] = Counter()

    @property
    def document_count(self) -> int:
        return len(self._documents)

    @property
    def documents(self) -> tuple[tuple[str, ...], ...]:
        return tuple(self._documents)

    def document_frequency(self, token: str) -> int:
        return self._document_frequency.get(token, 0)

    def inverse_document_frequency(self, token: str) -> float:
        """Unsmoothed ``ln(D / df)``; 0.0 for tokens no document contains."""
        df = self.document_frequency(token)
        if df == 0:
            return 0.0
        return log(self.document_count / df)

    def add_document(self, text: str) -> Vector:
        """Fold ``text`` into the corpus and return its TF-IDF vector."""
        tokens = tokenize(text)
        self._documents.append(tuple(tokens))
        self._document_frequency.update(set(tokens))

        vector = {
            token: tf * self.inverse_document_frequency(token)
            for token, tf in compute_term_frequency(tokens).items()
        }
        logger.debug(
            "Added document #{} with {} tokens ({} distinct)",
            self.document_count,
            len(tokens),
            len(vector),
        )
        return vector

    def reset(self) -> None:
        """Drop the corpus and the document-frequency table together."""
        self._documents.clear()
        self._document_frequency.clear()
