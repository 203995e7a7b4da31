"""
FastAPI application factory and browser lifespan.
"""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI
from playwright.async_api import Error as PlaywrightAsyncError

from browser_utils import BrowserSession
from config.settings import AppSettings
from logging_utils import setup_server_logging
from models import (
    ApiKeyRejected,
    BrowserAutomationError,
    ConfigurationError,
    SessionNotReadyError,
)

from .auth import api_key_rejected_handler
from .error_utils import (
    browser_error_handler,
    configuration_error_handler,
    playwright_error_handler,
    session_not_ready_handler,
)
from .routes import router
from .server_state import state


async def _start_browser_session(settings: AppSettings) -> None:
    logger = state.logger
    session = BrowserSession(settings)
    state.session = session
    try:
        await session.start()
        await session.login()
        logger.info("✅ Browser session authenticated and ready.")
    except asyncio.CancelledError:
        raise
    except (BrowserAutomationError, ConfigurationError, PlaywrightAsyncError) as e:
        state.startup_error = str(e)
        logger.error(f"❌ Browser session startup failed: {e}", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    state.logger = setup_server_logging()
    state.logger.info("--- Chat relay server starting ---")
    state.is_initializing = True
    state.startup_error = None
    try:
        state.settings = AppSettings.from_env()
        await _start_browser_session(state.settings)
    except ConfigurationError as e:
        state.startup_error = str(e)
        state.logger.error(f"❌ Invalid configuration: {e}")
    finally:
        state.is_initializing = False

    yield

    state.logger.info("--- Chat relay server shutting down ---")
    if state.session is not None:
        await state.session.close()
    state.session = None


def create_app() -> FastAPI:
    app = FastAPI(
        title="Chat Relay",
        description="Relays prompts to a browser-driven chat UI.",
        lifespan=lifespan,
    )
    app.add_exception_handler(ApiKeyRejected, api_key_rejected_handler)
    app.add_exception_handler(SessionNotReadyError, session_not_ready_handler)
    app.add_exception_handler(BrowserAutomationError, browser_error_handler)
    app.add_exception_handler(PlaywrightAsyncError, playwright_error_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.include_router(router)
    return app
