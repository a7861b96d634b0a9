"""Landing page: GET / answers with a plain-text welcome."""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Home"])

WELCOME_MESSAGE = "Welcome to the HomePage!"


@router.get("/", response_class=PlainTextResponse, summary="Welcome page")
async def home_page() -> PlainTextResponse:
    logger.info("Endpoint hit: home_page")
    return PlainTextResponse(WELCOME_MESSAGE)
