"""Chat and translation endpoints over a previously returned summary."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, StreamingResponse
from media_summary_common.logging import setup_logging

from dependencies import get_chat_relay, get_translator
from domain import ChatRelay, Translator
from exceptions import TranslationError
from response_models import (
    ChatRequest,
    ErrorResponse,
    TranslateRequest,
    TranslateResponse,
)

logger = setup_logging()

router = APIRouter(tags=["conversation"])

ChatRelayDep = Annotated[ChatRelay, Depends(get_chat_relay)]
TranslatorDep = Annotated[Translator, Depends(get_translator)]

TRANSLATE_FAILED = "An error occurred during translation."


@router.post("/chat")
def chat(request: ChatRequest, relay: ChatRelayDep) -> StreamingResponse:
    """Streams the assistant's reply as server-sent events."""
    return StreamingResponse(
        relay.stream(request.message, request.summary),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
    )


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={500: {"model": ErrorResponse}},
)
def translate(request: TranslateRequest, translator: TranslatorDep):
    """Translates text into the requested language in one response."""
    try:
        translation = translator.translate(request.text, request.target_language)
    except TranslationError as e:
        logger.error(f"Translation failed: {e}")
        return JSONResponse(status_code=500, content={"error": TRANSLATE_FAILED})
    except Exception as e:
        logger.error(f"Unexpected error during translation: {e}")
        return JSONResponse(status_code=500, content={"error": TRANSLATE_FAILED})

    return TranslateResponse(translation=translation)
