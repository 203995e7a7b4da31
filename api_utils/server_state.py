"""
Centralized server state shared by the lifespan hooks and request dependencies.
"""

import logging
from typing import Optional

from browser_utils import BrowserSession
from config.settings import AppSettings
from logging_utils import SERVER_LOGGER_NAME


class ServerState:
    def __init__(self):
        self.settings: Optional[AppSettings] = None
        self.session: Optional[BrowserSession] = None
        self.is_initializing = False
        self.startup_error: Optional[str] = None
        self.logger = logging.getLogger(SERVER_LOGGER_NAME)

    def reset(self) -> None:
        self.settings = None
        self.session = None
        self.is_initializing = False
        self.startup_error = None


state = ServerState()
