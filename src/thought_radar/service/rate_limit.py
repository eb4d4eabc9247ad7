"""Per-author posting window."""

from __future__ import annotations

import time
from collections.abc import Callable

from thought_radar.service.errors import RejectionReason, SubmissionRejected


def _wall_clock_ms() -> float:
    return time.time() * 1000.0


class AuthorRateLimiter:
    """Tracks the last accepted post of each normalized author name."""

    def __init__(
        self,
        window_ms: float = 3000.0,
        *,
        anonymous_author: str = "Anonymous",
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.window_ms = window_ms
        self.anonymous_author = anonymous_author
        self._clock = clock or _wall_clock_ms
        self._last_post_ms: dict[str, float] = {}

    def normalize_author(self, author: str | None) -> str:
        return (author or "").strip() or self.anonymous_author

    def check(self, author: str) -> None:
        last = self._last_post_ms.get(author)
        if last is None:
            return
        elapsed = self._clock() - last
        if elapsed < self.window_ms:
            raise SubmissionRejected(
                RejectionReason.RATE_LIMITED,
                f"Please wait {self.window_ms / 1000:g} seconds before emitting another thought.",
            )

    def mark(self, author: str) -> None:
        self._last_post_ms[author] = self._clock()

    def clear(self) -> None:
        self._last_post_ms.clear()
