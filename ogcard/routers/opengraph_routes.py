import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, Header, Query
from pydantic import BaseModel

from ogcard.config.logging_config import get_logger
from ogcard.controllers.opengraph_controller import OpenGraphController
from .dependencies import get_controller

logger = get_logger(__name__)

router = APIRouter()


class ParseRequest(BaseModel):
    html: str
    url: Optional[str] = None


@router.get("")
async def get_opengraph(
    url: str = Query(...),
    accept_language: Optional[str] = Header(None),
    user_agent: Optional[str] = Header(None),
    controller: OpenGraphController = Depends(get_controller),
):
    logger.info(f"Received request for Open Graph metadata: {url}")
    return await controller.get_metadata(url, accept_language, user_agent)


@router.post("/parse")
async def parse_opengraph(
    body: ParseRequest,
    accept_language: Optional[str] = Header(None),
    controller: OpenGraphController = Depends(get_controller),
):
    logger.info(f"Received HTML parse request for: {body.url}")
    # Image probes block, keep them off the event loop
    return await asyncio.to_thread(controller.parse_html, body.html, body.url, accept_language)
