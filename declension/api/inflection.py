"""Inflection API Routes

HTTP binding for host applications: a client posts the raw text of an input
or display element and writes the returned result into its target element.
"""
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from declension.core.logging import api_logger, bind_context
from declension.facade import Declension
from declension.languages.types import NameGroupPolicy

log = api_logger()

router = APIRouter()


def get_declension(request: Request) -> Declension:
    return request.app.state.declension


# === Request/Response Models ===

class InflectRequest(BaseModel):
    text: str
    language: str = "ru"
    case: str
    policy: NameGroupPolicy | None = None
    target: str | None = Field(None, description="Client-side element that receives the result")


class InflectResponse(BaseModel):
    text: str
    result: str
    language: str
    case: str
    target: str | None = None


class InflectTextRequest(BaseModel):
    text: str
    language: str = "ru"
    case: str
    first_word_only: bool = True


class InflectTextResponse(BaseModel):
    text: str
    result: str


# === Endpoints ===

@router.post("", response_model=InflectResponse)
async def inflect(body: InflectRequest, declension: Declension = Depends(get_declension)):
    """Inflect a word, name or phrase."""
    bind_context(language=body.language, case=body.case)
    result = declension.inflect_word(body.text, body.language, body.case, body.policy)
    log.debug("inflect_served", policy=body.policy)
    return InflectResponse(
        text=body.text,
        result=result,
        language=body.language,
        case=body.case,
        target=body.target,
    )


@router.post("/text", response_model=InflectTextResponse)
async def inflect_text(body: InflectTextRequest, declension: Declension = Depends(get_declension)):
    """Inflect the first word of a sentence, or all of its words."""
    bind_context(language=body.language, case=body.case)
    result = declension.inflect_text(body.text, body.language, body.case, body.first_word_only)
    return InflectTextResponse(text=body.text, result=result)
