import re
from typing import List, Optional

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from config import PROMPT_TEXTAREA_SELECTOR, RESPONSE_CONTAINER_SELECTOR

_TESTID_PATTERN = re.compile(r'data-testid="([^"]+)"')


class FakeArticle:
    def __init__(self, testid: str, samples: Optional[List[str]] = None, markup: Optional[str] = None):
        self.testid = testid
        self.samples = list(samples) if samples is not None else None
        self.markup = markup
        self.reads = 0

    @property
    def has_content(self) -> bool:
        return self.samples is not None

    def read(self) -> str:
        index = min(self.reads, len(self.samples) - 1)
        self.reads += 1
        return self.samples[index]

    @property
    def current(self) -> str:
        """Text the DOM shows right now: the most recently read sample."""
        index = min(max(self.reads - 1, 0), len(self.samples) - 1)
        return self.samples[index]


class FakeKeyboard:
    def __init__(self, page: "FakeChatPage"):
        self.page = page

    async def insert_text(self, text: str) -> None:
        self.page.typed.append(text)


class FakeRoleLocator:
    def __init__(self, page: "FakeChatPage", name: str):
        self.page = page
        self.name = name

    @property
    def first(self):
        return self

    async def click(self, timeout=None):
        if self.name in self.page.missing_buttons:
            raise PlaywrightTimeoutError(f"Timeout waiting for button '{self.name}'")
        self.page.clicked.append(self.name)


class FakeLocator:
    def __init__(self, page: "FakeChatPage", selector: str):
        self.page = page
        self.selector = selector

    @property
    def first(self):
        return self

    def _article(self) -> Optional[FakeArticle]:
        match = _TESTID_PATTERN.search(self.selector)
        if not match:
            return None
        return self.page.find_article(match.group(1))

    async def evaluate_all(self, expression, arg=None):
        assert self.selector == RESPONSE_CONTAINER_SELECTOR
        return [article.testid for article in self.page.articles]

    async def count(self) -> int:
        if self.selector == PROMPT_TEXTAREA_SELECTOR:
            return 1 if self.page.has_editor else 0
        article = self._article()
        return 1 if article is not None and article.has_content else 0

    async def inner_text(self, timeout=None) -> str:
        return self._article().read()

    async def inner_html(self, timeout=None) -> str:
        article = self._article()
        if article.markup is not None:
            return article.markup
        return f"<p>{article.current}</p>"

    async def wait_for(self, state=None, timeout=None):
        if self.selector == PROMPT_TEXTAREA_SELECTOR and not self.page.has_editor:
            raise PlaywrightTimeoutError("Timeout waiting for prompt editor")

    async def click(self, timeout=None):
        pass

    async def evaluate(self, expression, arg=None):
        self.page.editor_cleared += 1

    async def press(self, key: str, timeout=None):
        assert key == "Enter"
        self.page.on_submit()


class FakeChatPage:
    """Minimal stand-in for a Playwright page showing the chat UI.

    Submitting a prompt appends a user turn and an assistant turn whose text
    is read from ``reply_samples`` one sample per read.
    """

    def __init__(
        self,
        url: str = "about:blank",
        articles: Optional[List[FakeArticle]] = None,
        reply_samples: Optional[List[str]] = None,
        reply_markup: Optional[str] = None,
        thread_after_submit: Optional[str] = "abc-123",
        late_history: Optional[List[FakeArticle]] = None,
        reply_pending: bool = False,
    ):
        self.url = url
        self.articles: List[FakeArticle] = list(articles or [])
        self.reply_samples = reply_samples if reply_samples is not None else ["Hello", "Hello world", "Hello world"]
        self.reply_markup = reply_markup
        self.thread_after_submit = thread_after_submit
        # Earlier turns of a resumed thread that only render after submission
        self.late_history: List[FakeArticle] = list(late_history or [])
        self.reply_pending = reply_pending
        self.has_editor = True
        self.respond = True
        self.missing_buttons: set = set()
        self.goto_error: Optional[Exception] = None
        self.visited: List[str] = []
        self.clicked: List[str] = []
        self.typed: List[str] = []
        self.editor_cleared = 0
        self.screenshots: List[str] = []
        self.keyboard = FakeKeyboard(self)

    def find_article(self, testid: str) -> Optional[FakeArticle]:
        for article in self.articles:
            if article.testid == testid:
                return article
        return None

    def on_submit(self) -> None:
        self.articles.extend(self.late_history)
        self.late_history = []
        turn = len(self.articles) + 1
        self.articles.append(FakeArticle(f"conversation-turn-{turn}"))
        if self.respond:
            samples = None if self.reply_pending else self.reply_samples
            self.articles.append(
                FakeArticle(f"conversation-turn-{turn + 1}", samples, self.reply_markup)
            )
        if self.thread_after_submit:
            self.url = f"https://chatgpt.com/c/{self.thread_after_submit}"

    async def goto(self, url: str, wait_until=None, timeout=None):
        if self.goto_error is not None:
            raise self.goto_error
        self.visited.append(url)
        self.url = url

    def get_by_role(self, role: str, name: str, exact: bool = False):
        return FakeRoleLocator(self, name)

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    def is_closed(self) -> bool:
        return False

    async def screenshot(self, path=None, full_page=False, timeout=None):
        self.screenshots.append(path)


@pytest.fixture(autouse=True)
def _isolate_error_snapshots(tmp_path, monkeypatch):
    monkeypatch.setattr("browser_utils.operations.ERROR_SNAPSHOT_DIR", str(tmp_path / "errors_py"))


@pytest.fixture
def fake_page_factory():
    def _factory(**kwargs) -> FakeChatPage:
        return FakeChatPage(**kwargs)

    return _factory


@pytest.fixture
def fake_article_factory():
    def _factory(testid: str, samples: Optional[List[str]] = None, markup: Optional[str] = None) -> FakeArticle:
        return FakeArticle(testid, samples, markup)

    return _factory
