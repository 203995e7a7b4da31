"""
PageController module
Wraps every direct Playwright interaction needed to send one prompt and read
back its reply.
"""
import asyncio
import logging
from typing import List, Optional, Set

from playwright.async_api import Error as PlaywrightAsyncError
from playwright.async_api import Page as AsyncPage

from config import (
    NO_SOURCES_PROMPT_PREFIX,
    PROMPT_TEXTAREA_SELECTOR,
    REASON_TOGGLE_NAME,
    RESPONSE_CONTAINER_SELECTOR,
    RESPONSE_ID_ATTRIBUTE,
    RESPONSE_TEXT_SELECTOR,
    SEARCH_TOGGLE_NAME,
)
from config.settings import AppSettings
from logging_utils import set_request_id
from models import (
    NavigationError,
    PromptRequest,
    PromptResult,
    PromptSubmissionError,
    ResponseContainerNotFoundError,
)

from .cleaner import clean_response
from .operations import extract_thread_id, resolve_thread_url, save_error_snapshot
from .stabilizer import ResponseStabilizer, StabilizationResult

_CLEAR_EDITOR_JS = """
(el) => {
    el.focus();
    document.execCommand('selectAll', false, null);
    document.execCommand('delete', false, null);
}
"""

_LIST_RESPONSE_IDS_JS = "(els, attr) => els.map(el => el.getAttribute(attr))"


class PageController:
    """Encapsulates all chat page operations for a single prompt."""

    def __init__(
        self,
        page: AsyncPage,
        settings: AppSettings,
        logger: Optional[logging.Logger] = None,
        req_id: str = "",
        stabilizer: Optional[ResponseStabilizer] = None,
    ):
        self.page = page
        self.settings = settings
        self.logger = logger or logging.getLogger("PageController")
        self.req_id = req_id
        self.stabilizer = stabilizer or ResponseStabilizer(
            poll_interval=settings.polling_interval_ms / 1000,
            stable_repeats=settings.stable_repeat_threshold,
            req_id=req_id,
        )

    async def navigate(self, thread_id: Optional[str]) -> None:
        """Open a fresh conversation or resume ``thread_id``."""
        url = resolve_thread_url(self.settings.base_url, thread_id)
        self.logger.info(f"[{self.req_id}] 🌐 Loading URL: {url}")
        try:
            await self.page.goto(
                url,
                wait_until="domcontentloaded",
                timeout=self.settings.navigation_timeout_ms,
            )
        except PlaywrightAsyncError as e:
            self.logger.error(f"[{self.req_id}] ❌ Navigation to {url} failed: {e}")
            await save_error_snapshot(self.page, f"navigation_error_{self.req_id}")
            raise NavigationError(f"Navigation to {url} failed: {e}") from e

    async def _toggle_mode(self, name: str) -> None:
        """Click a composer mode button. Best effort: failures are only logged."""
        self.logger.info(f"[{self.req_id}] 🔍 Enabling {name} mode...")
        try:
            await self.page.get_by_role("button", name=name).first.click(
                timeout=self.settings.click_timeout_ms
            )
        except PlaywrightAsyncError as e:
            self.logger.warning(f"[{self.req_id}] ⚠️ Could not enable {name} mode: {e}")

    async def wait_for_editor(self):
        """Wait until the composer is visible, i.e. the conversation has rendered."""
        editor = self.page.locator(PROMPT_TEXTAREA_SELECTOR)
        try:
            await editor.wait_for(state="visible", timeout=self.settings.login_ready_timeout_ms)
        except PlaywrightAsyncError as e:
            self.logger.error(f"[{self.req_id}] ❌ Prompt editor never became visible: {e}")
            await save_error_snapshot(self.page, f"editor_missing_{self.req_id}")
            raise PromptSubmissionError(f"Prompt editor not available: {e}") from e
        return editor

    async def _clear_editor(self):
        self.logger.info(f"[{self.req_id}] ✏️ Clearing editor...")
        editor = self.page.locator(PROMPT_TEXTAREA_SELECTOR)
        await editor.click(timeout=self.settings.click_timeout_ms)
        await editor.evaluate(_CLEAR_EDITOR_JS)
        return editor

    async def submit_prompt(self, prompt: str) -> None:
        """Replace the editor content with the prefixed prompt and press Enter."""
        try:
            editor = await self._clear_editor()
            self.logger.info(f"[{self.req_id}] ✏️ Typing and submitting prompt ({len(prompt)} chars)...")
            await self.page.keyboard.insert_text(NO_SOURCES_PROMPT_PREFIX + prompt)
            await editor.press("Enter", timeout=self.settings.click_timeout_ms)
        except PlaywrightAsyncError as e:
            self.logger.error(f"[{self.req_id}] ❌ Prompt submission failed: {e}")
            await save_error_snapshot(self.page, f"submit_error_{self.req_id}")
            raise PromptSubmissionError(f"Prompt submission failed: {e}") from e

    async def list_response_ids(self) -> List[str]:
        """Response container ids in document order."""
        ids = await self.page.locator(RESPONSE_CONTAINER_SELECTOR).evaluate_all(
            _LIST_RESPONSE_IDS_JS, RESPONSE_ID_ATTRIBUTE
        )
        return [i for i in ids if i]

    @staticmethod
    def content_selector(response_id: str) -> str:
        return (
            f'{RESPONSE_CONTAINER_SELECTOR}[{RESPONSE_ID_ATTRIBUTE}="{response_id}"] '
            f"{RESPONSE_TEXT_SELECTOR}"
        )

    async def locate_response(self, known_ids: Optional[Set[str]]) -> str:
        """
        Find the container holding the reply to the prompt just submitted.

        Only the newest container counts: with ``known_ids`` (containers present
        before submission) it must also be new, and older new containers are
        never considered. The container must hold its content node; waits up to
        the response container timeout.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.settings.response_container_timeout_ms / 1000
        interval = self.settings.polling_interval_ms / 1000

        self.logger.info(f"[{self.req_id}] ⏳ Waiting for response container to appear...")
        while True:
            ids = await self.list_response_ids()
            if known_ids is None:
                candidates = ids
            else:
                candidates = [i for i in ids if i not in known_ids]

            if candidates:
                response_id = candidates[-1]
                if await self.page.locator(self.content_selector(response_id)).count() > 0:
                    self.logger.info(f"[{self.req_id}] Response container located: {response_id}")
                    return response_id

            if loop.time() >= deadline:
                break
            await asyncio.sleep(interval)

        self.logger.error(f"[{self.req_id}] ❌ No new response container appeared.")
        await save_error_snapshot(self.page, f"response_container_missing_{self.req_id}")
        raise ResponseContainerNotFoundError(
            f"No response content appeared within {self.settings.response_container_timeout_ms} ms"
        )

    async def _read_response_text(self, selector: str) -> str:
        locator = self.page.locator(selector)
        if await locator.count() == 0:
            return ""
        return (await locator.first.inner_text()).strip()

    async def _capture_markup(self, selector: str) -> Optional[str]:
        try:
            locator = self.page.locator(selector)
            if await locator.count() == 0:
                return None
            return await locator.first.inner_html()
        except PlaywrightAsyncError as e:
            self.logger.debug(f"[{self.req_id}] Markup capture failed, using sampled text: {e}")
            return None

    async def get_response(self, response_id: str, reason: bool) -> Optional[str]:
        """Wait for the reply to stop streaming and return it as plain text."""
        selector = self.content_selector(response_id)
        result: StabilizationResult = await self.stabilizer.wait_until_stable(
            lambda: self._read_response_text(selector),
            self.settings.poll_budget(reason),
        )

        raw = result.text
        if raw is not None:
            raw = await self._capture_markup(selector) or raw
        return clean_response(raw)

    async def send_prompt(self, request: PromptRequest) -> PromptResult:
        set_request_id(self.req_id)
        await self.navigate(request.thread_id)

        await self.wait_for_editor()

        if request.reason:
            await self._toggle_mode(REASON_TOGGLE_NAME)
        if request.search:
            await self._toggle_mode(SEARCH_TOGGLE_NAME)

        known_ids = set(await self.list_response_ids())
        await self.submit_prompt(request.prompt)
        await asyncio.sleep(self.settings.initial_wait_ms / 1000)

        response_id = await self.locate_response(known_ids)
        response = await self.get_response(response_id, request.reason)

        thread_id = extract_thread_id(self.page.url)
        self.logger.info(f"[{self.req_id}] Resolved threadId: {thread_id}")
        return PromptResult(thread_id=thread_id, response=response)
