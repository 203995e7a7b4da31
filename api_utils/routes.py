"""
HTTP routes
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from browser_utils import BrowserSession
from logging_utils import random_id, set_request_id
from models import PromptRequest

from .auth import verify_api_key
from .dependencies import get_browser_session, get_logger, get_server_state

router = APIRouter()


@router.post("/api/prompt", dependencies=[Depends(verify_api_key)])
async def prompt_endpoint(
    request: PromptRequest,
    session: BrowserSession = Depends(get_browser_session),
    logger: logging.Logger = Depends(get_logger),
) -> JSONResponse:
    req_id = random_id()
    set_request_id(req_id)
    logger.info(
        f"[{req_id}] Received prompt (reason={request.reason}, search={request.search}, "
        f"threadId={request.thread_id})"
    )
    result = await session.send_prompt(request, req_id=req_id)
    logger.info(f"[{req_id}] ✅ Prompt completed (threadId={result.thread_id}).")
    return JSONResponse(content=result.model_dump(by_alias=True))


@router.get("/health")
async def health_check(server_state: Dict[str, Any] = Depends(get_server_state)) -> JSONResponse:
    if server_state["is_logged_in"]:
        status = "ok"
    elif server_state["is_initializing"]:
        status = "initializing"
    else:
        status = "error"

    payload = {
        "status": status,
        "browserReady": server_state["is_browser_connected"],
        "loggedIn": server_state["is_logged_in"],
    }
    if server_state["startup_error"]:
        payload["detail"] = server_state["startup_error"]
    return JSONResponse(status_code=200 if status == "ok" else 503, content=payload)
