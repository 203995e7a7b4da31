"""
API key gatekeeper.
"""

import secrets

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from config import INVALID_API_KEY_MESSAGE
from config.settings import AppSettings
from models import ApiKeyRejected

from .dependencies import get_logger, get_settings


def is_request_admitted(settings: AppSettings, presented_key) -> bool:
    if settings.is_permissive:
        return True
    if not presented_key or not settings.api_key:
        return False
    return secrets.compare_digest(presented_key.encode(), settings.api_key.encode())


async def verify_api_key(request: Request, settings: AppSettings = Depends(get_settings)) -> None:
    """Admit the request only when the API key header matches the configured key.

    Development mode (``APP_ENV=development``) skips the check.
    """
    if is_request_admitted(settings, request.headers.get(settings.api_key_header)):
        return
    get_logger().warning(f"🔒 Rejected {request.method} {request.url.path}: invalid API key")
    raise ApiKeyRejected()


async def api_key_rejected_handler(request: Request, exc: ApiKeyRejected) -> JSONResponse:
    return JSONResponse(status_code=401, content={"error": INVALID_API_KEY_MESSAGE})
