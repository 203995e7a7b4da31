"""Exception types raised while driving the chat UI or admitting API requests."""


class BrowserAutomationError(Exception):
    """A required browser step failed; the current login or prompt is aborted."""


class LoginError(BrowserAutomationError):
    """The login sequence could not reach the authenticated chat view."""


class NavigationError(BrowserAutomationError):
    """Page navigation failed or exceeded its time bound."""


class PromptSubmissionError(BrowserAutomationError):
    """The prompt editor could not be found, cleared or submitted."""


class ResponseContainerNotFoundError(BrowserAutomationError):
    """No new response container appeared after the prompt was submitted."""


class SessionNotReadyError(BrowserAutomationError):
    """The browser session has not been started or logged in yet."""


class ConfigurationError(Exception):
    """Settings are missing or inconsistent."""


class ApiKeyRejected(Exception):
    """The caller did not present the configured API key."""
