"""
Maps internal exceptions onto structured JSON error responses.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from playwright.async_api import Error as PlaywrightAsyncError

from logging_utils import get_request_id
from models import BrowserAutomationError, ConfigurationError, SessionNotReadyError

from .dependencies import get_logger


def error_response(status_code: int, message: str, **headers: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers or None)


async def session_not_ready_handler(request: Request, exc: SessionNotReadyError) -> JSONResponse:
    return error_response(503, str(exc) or "Browser session is not ready", **{"Retry-After": "30"})


async def browser_error_handler(request: Request, exc: BrowserAutomationError) -> JSONResponse:
    get_logger().error(f"[{get_request_id()}] Browser automation failed: {exc}")
    return error_response(502, str(exc))


async def playwright_error_handler(request: Request, exc: PlaywrightAsyncError) -> JSONResponse:
    get_logger().error(f"[{get_request_id()}] Unexpected Playwright error: {exc}")
    return error_response(502, f"Browser error: {exc.message}")


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    get_logger().error(f"Configuration error: {exc}")
    return error_response(500, str(exc))
