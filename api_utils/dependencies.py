"""
FastAPI dependencies module
"""

import logging
from typing import Any, Dict

from browser_utils import BrowserSession
from config.settings import AppSettings
from models import SessionNotReadyError


def get_logger() -> logging.Logger:
    from api_utils.server_state import state

    return state.logger


def get_settings() -> AppSettings:
    from api_utils.server_state import state

    if state.settings is None:
        if state.startup_error is not None:
            # Startup already rejected the environment
            raise SessionNotReadyError(f"Server is not configured: {state.startup_error}")
        state.settings = AppSettings.from_env()
    return state.settings


def get_browser_session() -> BrowserSession:
    from api_utils.server_state import state

    session = state.session
    if session is None or not session.is_ready:
        raise SessionNotReadyError("Browser session is not ready")
    return session


def get_server_state() -> Dict[str, Any]:
    from api_utils.server_state import state

    session = state.session
    # Return a snapshot so callers cannot mutate the shared state
    return dict(
        is_initializing=state.is_initializing,
        is_browser_connected=session is not None and session.page is not None,
        is_logged_in=session is not None and session.is_ready,
        startup_error=state.startup_error,
    )
