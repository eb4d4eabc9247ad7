"""Short-summary collaborator used for thought tickets."""

from __future__ import annotations

import asyncio
import re
from abc import ABC, abstractmethod
from typing import Any

from langchain_core.prompts import ChatPromptTemplate
from loguru import logger

from thought_radar.config import SummaryConfig

SUMMARY_UNAVAILABLE = "Summary unavailable."
SUMMARY_EMPTY = "Could not summarize."
SUMMARY_FAILED = "Summary generation failed."

_STRIP_CHARS = re.compile(r'["*]')

_PROMPT = ChatPromptTemplate.from_messages(
    [("human", 'Summarize this thought in {max_words} words or less: "{text}"')]
)


class Summarizer(ABC):
    """Summarizer interface. Implementations must not raise."""

    @abstractmethod
    async def summarize(self, text: str) -> str:
        """Return a short summary or one of the fallback sentinels."""


class StaticSummarizer(Summarizer):
    """Used when no language model is configured."""

    def __init__(self, message: str = SUMMARY_UNAVAILABLE) -> None:
        self.message = message

    async def summarize(self, text: str) -> str:
        return self.message


class LLMSummarizer(Summarizer):
    """Summarizes with a LangChain chat model, falling back on any failure."""

    def __init__(self, llm: Any, config: SummaryConfig | None = None) -> None:
        self.llm = llm
        self.config = config or SummaryConfig()
        self._chain = _PROMPT | llm

    async def summarize(self, text: str) -> str:
        try:
            response = await asyncio.wait_for(
                self._chain.ainvoke({"text": text, "max_words": self.config.max_words}),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Summary timed out after {:.1f}s", self.config.timeout_seconds
            )
            return SUMMARY_FAILED
        except Exception:
            logger.exception("Summary call failed")
            return SUMMARY_FAILED

        content = getattr(response, "content", response)
        summary = _STRIP_CHARS.sub("", str(content)).strip()
        return summary or SUMMARY_EMPTY


def create_summarizer(llm: Any | None, config: SummaryConfig | None = None) -> Summarizer:
    if llm is None:
        logger.warning("No language model configured; summaries are disabled")
        return StaticSummarizer()
    return LLMSummarizer(llm, config)
