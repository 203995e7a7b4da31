# Prompt request/response models
from .prompt import PromptRequest, PromptResult

# Exception classes
from .exceptions import (
    ApiKeyRejected,
    BrowserAutomationError,
    ConfigurationError,
    LoginError,
    NavigationError,
    PromptSubmissionError,
    ResponseContainerNotFoundError,
    SessionNotReadyError,
)

__all__ = [
    # Prompt models
    'PromptRequest',
    'PromptResult',

    # Exceptions
    'ApiKeyRejected',
    'BrowserAutomationError',
    'ConfigurationError',
    'LoginError',
    'NavigationError',
    'PromptSubmissionError',
    'ResponseContainerNotFoundError',
    'SessionNotReadyError',
]
