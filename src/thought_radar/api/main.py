"""FastAPI entrypoint for posting thoughts and reading the radar."""

from __future__ import annotations

import os
from typing import Any

from fastapi import FastAPI, HTTPException
from loguru import logger
from pydantic import BaseModel, Field

from thought_radar.config import MAX_THOUGHT_CHARS, RadarConfig, SubmissionConfig, SummaryConfig
from thought_radar.display.radar import RadarProjector
from thought_radar.obs.logging import configure_logging
from thought_radar.service.errors import RejectionReason, SubmissionRejected
from thought_radar.service.orchestrator import ThoughtRadar
from thought_radar.service.summarizer import create_summarizer
from thought_radar.types import ThoughtRecord, TicketData

_STATUS_BY_REASON = {
    RejectionReason.EMPTY_TEXT: 400,
    RejectionReason.RATE_LIMITED: 429,
    RejectionReason.TOO_SIMILAR: 409,
}


def _create_llm(config: SummaryConfig) -> Any:
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        return None

    from langchain_openai import ChatOpenAI

    return ChatOpenAI(model=os.getenv("OPENAI_MODEL", config.model), temperature=0)


class ThoughtRequest(BaseModel):
    text: str = Field(max_length=MAX_THOUGHT_CHARS)
    author: str = ""
    ghost: bool = False


configure_logging(os.getenv("THOUGHT_RADAR_LOG_LEVEL", "INFO"))

app = FastAPI(title="Thought Radar", version="0.1.0")

_summary_config = SummaryConfig()
_llm = _create_llm(_summary_config)
_summarizer = create_summarizer(_llm, _summary_config)
_session = ThoughtRadar(SubmissionConfig())
_projector = RadarProjector(RadarConfig())


def _record_payload(record: ThoughtRecord) -> dict[str, Any]:
    return {
        "id": record.thought_id,
        "text": record.text,
        "author": record.author,
        "timestamp": record.timestamp.isoformat(),
        "similarity": record.similarity,
        "ghost": record.is_ghost,
    }


def _ticket_payload(ticket: TicketData) -> dict[str, Any]:
    return {
        "ticket": f"{ticket.thought.thought_id:06d}",
        "thought": _record_payload(ticket.thought),
        "summary": ticket.summary,
    }


@app.get("/health")
def health() -> dict[str, Any]:
    return {
        "status": "ok",
        "llm_configured": _llm is not None,
        "record_count": len(_session.records),
        "document_count": _session.engine.document_count,
    }


@app.post("/thoughts", status_code=201)
async def emit_thought(request: ThoughtRequest) -> dict[str, Any]:
    # submit() runs to completion before the first await, so engine updates
    # from concurrent requests never interleave.
    try:
        record = _session.submit(request.text, request.author, is_ghost=request.ghost)
    except SubmissionRejected as exc:
        raise HTTPException(
            status_code=_STATUS_BY_REASON[exc.reason],
            detail={"reason": exc.reason.value, "message": exc.message},
        ) from exc

    ticket = TicketData(thought=record, summary=await _summarizer.summarize(record.text))
    logger.debug("Ticket ready for thought #{}", record.thought_id)
    return _ticket_payload(ticket)


@app.get("/thoughts")
def list_thoughts() -> dict[str, Any]:
    return {"items": [_record_payload(record) for record in _session.visible_records]}


@app.get("/thoughts/{thought_id}")
def thought_detail(thought_id: int) -> dict[str, Any]:
    try:
        record = _session.get(thought_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if record.is_ghost:
        raise HTTPException(status_code=404, detail=f"Thought not found: {thought_id}")
    return _record_payload(record)


@app.get("/radar")
def radar() -> dict[str, Any]:
    blips = _projector.project(_session.records)
    return {
        "items": [
            {
                "id": blip.thought_id,
                "radius": blip.radius,
                "angle": blip.angle,
                "x": blip.x,
                "y": blip.y,
                "opacity": blip.opacity,
                "newest": blip.is_newest,
            }
            for blip in blips
        ]
    }


@app.post("/session/clear")
def clear_session() -> dict[str, Any]:
    _session.reset()
    return {"status": "cleared"}
