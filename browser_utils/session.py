"""
Browser session lifecycle: one Playwright browser, one page, one login.
"""

import asyncio
import logging
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright
from playwright.async_api import Page as AsyncPage

from config.settings import AppSettings
from logging_utils import random_id
from models import PromptRequest, PromptResult, SessionNotReadyError

from .login import SessionAuthenticator
from .page_controller import PageController

logger = logging.getLogger("BrowserSession")


class BrowserSession:
    """
    Authenticated browser context owned by this process.

    Prompts are serialized through ``lock``: the page controller picks the
    reply container by watching what appears after submission, which only
    holds with a single prompt in flight.
    """

    def __init__(self, settings: AppSettings):
        self.settings = settings
        self.lock = asyncio.Lock()
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[AsyncPage] = None
        self.is_logged_in = False

    @property
    def is_ready(self) -> bool:
        return self.page is not None and not self.page.is_closed() and self.is_logged_in

    async def start(self) -> None:
        logger.info(f"🚀 Launching Chromium (headless={self.settings.headless})...")
        self.playwright = await async_playwright().start()
        launch_kwargs = {"headless": self.settings.headless}
        if self.settings.browser_channel:
            launch_kwargs["channel"] = self.settings.browser_channel
        self.browser = await self.playwright.chromium.launch(**launch_kwargs)
        self.context = await self.browser.new_context()
        self.page = await self.context.new_page()
        logger.info("✅ Browser page ready.")

    async def login(self) -> None:
        if self.page is None:
            raise SessionNotReadyError("Browser session not started")
        await SessionAuthenticator(self.settings).login(self.page)
        self.is_logged_in = True

    async def send_prompt(self, request: PromptRequest, req_id: Optional[str] = None) -> PromptResult:
        if not self.is_ready:
            raise SessionNotReadyError("Browser session is not ready")
        req_id = req_id or random_id()
        async with self.lock:
            controller = PageController(self.page, self.settings, req_id=req_id)
            return await controller.send_prompt(request)

    async def close(self) -> None:
        logger.info("Closing browser session...")
        self.is_logged_in = False
        for resource, name in ((self.context, "context"), (self.browser, "browser")):
            if resource is None:
                continue
            try:
                await resource.close()
            except Exception as e:
                logger.warning(f"Error closing browser {name}: {e}")
        if self.playwright is not None:
            try:
                await self.playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping Playwright: {e}")
        self.page = self.context = self.browser = self.playwright = None
        logger.info("Browser session closed.")
