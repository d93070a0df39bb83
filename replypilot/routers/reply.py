import logging
from functools import partial

import anyio
from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from replypilot.errors import InternalServerError, ReplyPilotError, ReviewValidationError
from replypilot.models.reply import ErrorResponse, ReplyRequest, ReplyResult
from replypilot.services.reply_router import ReplyRouter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["reply"])

_ERROR_RESPONSES = {code: {"model": ErrorResponse} for code in (400, 429, 500, 502)}


def get_reply_router(request: Request) -> ReplyRouter:
    return request.app.state.reply_router


def caller_id(request: Request) -> str:
    header = request.headers.get("x-client-id", "").strip()
    if header:
        return header
    return request.client.host if request.client else "anonymous"


async def _read_request(request: Request) -> ReplyRequest:
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        raise ReviewValidationError("Body must be a JSON object", error="Invalid request")

    review_text = body.get("reviewText", body.get("review_text"))
    if not isinstance(review_text, str) or not review_text.strip():
        raise ReviewValidationError("reviewText is required")

    try:
        return ReplyRequest.model_validate(body)
    except ValidationError as exc:
        raise ReviewValidationError(str(exc), error="Invalid request") from exc


@router.post("/generate-reply", response_model=ReplyResult, responses=_ERROR_RESPONSES)
@router.post("/replypilot", response_model=ReplyResult, responses=_ERROR_RESPONSES, include_in_schema=False)
async def generate_reply(request: Request, reply_router: ReplyRouter = Depends(get_reply_router)):
    """
    Generate a public seller reply to a marketplace review.

    1. Validate the body; a missing or blank ``reviewText`` is a 400.
    2. Route to a provider by language, with one fallback hop.
    3. Return the normalized reply with the engine and resolved language.
    """
    reply_request = await _read_request(request)
    caller = caller_id(request)

    try:
        return await anyio.to_thread.run_sync(partial(reply_router.generate, reply_request, caller))
    except ReplyPilotError:
        raise
    except Exception as exc:
        logger.exception("Reply generation failed unexpectedly")
        raise InternalServerError() from exc
