"""Rejection taxonomy for thought submissions."""

from __future__ import annotations

from enum import Enum


class RejectionReason(str, Enum):
    EMPTY_TEXT = "empty_text"
    RATE_LIMITED = "rate_limited"
    TOO_SIMILAR = "too_similar"


_MESSAGES = {
    RejectionReason.EMPTY_TEXT: "Thought cannot be empty.",
    RejectionReason.RATE_LIMITED: "Please wait before emitting another thought.",
    RejectionReason.TOO_SIMILAR: "This thought is too similar to an existing one.",
}


class SubmissionRejected(Exception):
    """Raised when a thought is refused; ``reason`` tells the caller why."""

    def __init__(self, reason: RejectionReason, message: str | None = None) -> None:
        self.reason = reason
        self.message = message or _MESSAGES[reason]
        super().__init__(self.message)
