"""Submission flow: validate, vectorize, gate on similarity, record."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from datetime import datetime, timezone

from loguru import logger

from thought_radar.config import SubmissionConfig
from thought_radar.engine.tfidf import SimilarityEngine, cosine_similarity
from thought_radar.service.errors import RejectionReason, SubmissionRejected
from thought_radar.service.rate_limit import AuthorRateLimiter
from thought_radar.types import ThoughtRecord, Vector


class ThoughtRadar:
    """One posting session: similarity engine, accepted records and rate limits.

    Submissions must be serialized by the caller. ``submit`` is synchronous and
    finishes every engine mutation before it returns, so downstream async work
    (summaries, tickets) can never interleave with corpus updates.

    Duplicate detection runs after the new text has been folded into the
    engine. A thought rejected as too similar therefore stays in the corpus and
    keeps influencing document frequencies until the session is reset.
    """

    def __init__(
        self,
        config: SubmissionConfig | None = None,
        *,
        engine: SimilarityEngine | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.config = config or SubmissionConfig()
        self.engine = engine or SimilarityEngine()
        self.rate_limiter = AuthorRateLimiter(
            self.config.rate_limit_ms,
            anonymous_author=self.config.anonymous_author,
            clock=clock,
        )
        self._records: list[ThoughtRecord] = []
        self._ids = itertools.count(1)

    @property
    def records(self) -> list[ThoughtRecord]:
        """All accepted records, ghosts included, in submission order."""
        return list(self._records)

    @property
    def visible_records(self) -> list[ThoughtRecord]:
        return [record for record in self._records if not record.is_ghost]

    def get(self, thought_id: int) -> ThoughtRecord:
        for record in self._records:
            if record.thought_id == thought_id:
                return record
        raise KeyError(f"Thought not found: {thought_id}")

    def submit(self, text: str, author: str = "", is_ghost: bool = False) -> ThoughtRecord:
        """Accept ``text`` as a new thought or raise ``SubmissionRejected``."""

        if not text.strip():
            raise SubmissionRejected(RejectionReason.EMPTY_TEXT)

        normalized_author = self.rate_limiter.normalize_author(author)
        try:
            self.rate_limiter.check(normalized_author)
        except SubmissionRejected:
            logger.warning("Rate limited thought from {}", normalized_author)
            raise

        has_prior = bool(self._records)
        vector = self.engine.add_document(text)
        similarity = self.max_similarity(vector)

        if has_prior and similarity > self.config.duplicate_threshold:
            logger.warning(
                "Rejected thought from {}: similarity {:.4f} exceeds {:.2f}",
                normalized_author,
                similarity,
                self.config.duplicate_threshold,
            )
            raise SubmissionRejected(RejectionReason.TOO_SIMILAR)

        record = ThoughtRecord(
            thought_id=next(self._ids),
            text=text,
            author=normalized_author,
            timestamp=datetime.now(timezone.utc),
            vector=vector,
            similarity=similarity if has_prior else 1.0,
            is_ghost=is_ghost,
        )
        self._records.append(record)
        self.rate_limiter.mark(normalized_author)
        logger.info(
            "Accepted thought #{} from {} (similarity={:.4f}, ghost={})",
            record.thought_id,
            normalized_author,
            record.similarity,
            is_ghost,
        )
        return record

    def max_similarity(self, vector: Vector) -> float:
        """Highest cosine similarity against every accepted record.

        Returns 0.0 when nothing has been accepted yet. ``submit`` records the
        first thought of a session as fully familiar (1.0) without gating it.
        """

        if not self._records:
            return 0.0
        return max(cosine_similarity(vector, record.vector) for record in self._records)

    def reset(self) -> None:
        """Discard records, corpus and posting history together."""
        self._records.clear()
        self.engine.reset()
        self.rate_limiter.clear()
        logger.info("Session cleared")
