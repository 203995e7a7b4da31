"""
Email/password login flow for the chat UI.
"""

import asyncio
import logging
from urllib.parse import urlparse

from playwright.async_api import Error as PlaywrightAsyncError
from playwright.async_api import Page as AsyncPage

from config import (
    CONTINUE_BUTTON_NAME,
    EMAIL_INPUT_SELECTOR,
    LOGIN_BUTTON_NAME,
    LOGIN_SUBMIT_BUTTON_SELECTOR,
    PASSWORD_INPUT_SELECTOR,
    PROMPT_TEXTAREA_SELECTOR,
)
from config.settings import AppSettings
from models import LoginError

from .operations import save_error_snapshot

logger = logging.getLogger("SessionAuthenticator")


class SessionAuthenticator:
    """Drives an unauthenticated page through the login form.

    Each step waits for its control; a missing control or a post-login editor
    that never shows up raises ``LoginError``. There is no retry.
    """

    def __init__(self, settings: AppSettings):
        self.settings = settings

    async def _settle(self) -> None:
        await asyncio.sleep(self.settings.login_settle_delay_ms / 1000)

    async def _ensure_origin(self, page: AsyncPage) -> None:
        host = urlparse(self.settings.base_url).netloc
        if host not in (page.url or ""):
            logger.info(f"🌐 Navigating to {self.settings.base_url} for login...")
            await page.goto(self.settings.base_url, timeout=self.settings.navigation_timeout_ms)

    async def login(self, page: AsyncPage) -> None:
        self.settings.require_credentials()
        step_timeout = self.settings.login_ready_timeout_ms
        step = "start"

        try:
            step = "open site"
            await self._ensure_origin(page)
            logger.info("Waiting for page load and potential redirects...")
            await self._settle()

            step = f"click '{LOGIN_BUTTON_NAME}'"
            logger.info("Locating and clicking the Log in button...")
            await page.get_by_role("button", name=LOGIN_BUTTON_NAME, exact=True).first.click(
                timeout=step_timeout
            )
            await self._settle()

            step = "fill email"
            logger.info("Filling in email address...")
            await page.locator(EMAIL_INPUT_SELECTOR).fill(self.settings.email, timeout=step_timeout)

            step = "submit email"
            logger.info("Submitting email...")
            await page.locator(LOGIN_SUBMIT_BUTTON_SELECTOR).first.click(timeout=step_timeout)

            step = "fill password"
            logger.info("Filling in password...")
            await page.locator(PASSWORD_INPUT_SELECTOR).fill(self.settings.password, timeout=step_timeout)

            step = f"click '{CONTINUE_BUTTON_NAME}'"
            logger.info("Submitting login form...")
            await page.get_by_role("button", name=CONTINUE_BUTTON_NAME, exact=True).first.click(
                timeout=step_timeout
            )

            step = "wait for chat editor"
            await self._settle()
            await page.wait_for_selector(PROMPT_TEXTAREA_SELECTOR, timeout=step_timeout)
        except asyncio.CancelledError:
            raise
        except PlaywrightAsyncError as e:
            logger.error(f"❌ Login failed at step '{step}': {e}")
            await save_error_snapshot(page, "login_error")
            raise LoginError(f"Login failed at step '{step}': {e}") from e

        logger.info("✅ Login flow complete.")
