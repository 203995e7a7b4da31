"""
Configuration Module Entry Point
Exports all configuration items for easy import by other modules.
"""

# Import all configuration items from individual config files
from .constants import *
from .timeouts import *
from .selectors import *
from .settings import *

# Explicitly export main configuration items (for IDE autocomplete and type checking)
__all__ = [
    # Constant Configuration
    'CHATGPT_BASE_URL',
    'THREAD_PATH_SEGMENT',
    'THREAD_ID_PATTERN',
    'NO_SOURCES_PROMPT_PREFIX',
    'API_KEY_HEADER',
    'INVALID_API_KEY_MESSAGE',
    'DEVELOPMENT_ENV',
    'POLL_PREVIEW_CHARS',

    # Timeout Configuration
    'NAVIGATION_TIMEOUT_MS',
    'LOGIN_SETTLE_DELAY_MS',
    'LOGIN_READY_TIMEOUT_MS',
    'INITIAL_WAIT_MS_BEFORE_POLLING',
    'RESPONSE_CONTAINER_TIMEOUT_MS',
    'POLLING_INTERVAL_MS',
    'POLL_LIMIT',
    'POLL_LIMIT_REASON',
    'STABLE_REPEAT_THRESHOLD',
    'CLICK_TIMEOUT_MS',

    # Selector Configuration
    'LOGIN_BUTTON_NAME',
    'CONTINUE_BUTTON_NAME',
    'EMAIL_INPUT_SELECTOR',
    'PASSWORD_INPUT_SELECTOR',
    'LOGIN_SUBMIT_BUTTON_SELECTOR',
    'PROMPT_TEXTAREA_SELECTOR',
    'REASON_TOGGLE_NAME',
    'SEARCH_TOGGLE_NAME',
    'RESPONSE_CONTAINER_SELECTOR',
    'RESPONSE_ID_ATTRIBUTE',
    'RESPONSE_TEXT_SELECTOR',
    'CITATION_SELECTOR',

    # Settings Configuration
    'DEBUG_LOGS_ENABLED',
    'LOG_FILE_MAX_BYTES',
    'LOG_FILE_BACKUP_COUNT',
    'LOG_DIR',
    'APP_LOG_FILE_PATH',
    'ERROR_SNAPSHOT_DIR',
    'HEADLESS',
    'BROWSER_CHANNEL',
    'AppSettings',

    # Utility Functions
    'get_environment_variable',
    'get_boolean_env',
    'get_int_env',
]
