"""
Main Settings Configuration Module
Contains runtime settings such as environment variable configuration, path configuration,
and the AppSettings object handed to the browser and API components.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from models.exceptions import ConfigurationError

from .constants import API_KEY_HEADER, CHATGPT_BASE_URL, DEVELOPMENT_ENV
from .timeouts import (
    CLICK_TIMEOUT_MS,
    INITIAL_WAIT_MS_BEFORE_POLLING,
    LOGIN_READY_TIMEOUT_MS,
    LOGIN_SETTLE_DELAY_MS,
    NAVIGATION_TIMEOUT_MS,
    POLL_LIMIT,
    POLL_LIMIT_REASON,
    POLLING_INTERVAL_MS,
    RESPONSE_CONTAINER_TIMEOUT_MS,
    STABLE_REPEAT_THRESHOLD,
)

# Load .env file
load_dotenv()

# --- Global Log Control Configuration ---
DEBUG_LOGS_ENABLED = os.environ.get("DEBUG_LOGS_ENABLED", "false").lower() in (
    "true",
    "1",
    "yes",
)

# --- Log Rotation Configuration ---
LOG_FILE_MAX_BYTES = int(
    os.environ.get("LOG_FILE_MAX_BYTES", str(10 * 1024 * 1024))
)  # 10MB default
LOG_FILE_BACKUP_COUNT = int(os.environ.get("LOG_FILE_BACKUP_COUNT", "5"))

# --- Path Configuration (Using pathlib) ---
_CONFIG_DIR = Path(__file__).parent
_PROJECT_ROOT = _CONFIG_DIR.parent

LOG_DIR = str(_PROJECT_ROOT / "logs")
APP_LOG_FILE_PATH = str(_PROJECT_ROOT / "logs" / "app.log")
ERROR_SNAPSHOT_DIR = str(_PROJECT_ROOT / "errors_py")


def get_environment_variable(key: str, default: str = '') -> str:
    """Get environment variable value"""
    return os.environ.get(key, default)


def get_boolean_env(key: str, default: bool = False) -> bool:
    """Get boolean environment variable"""
    value = os.environ.get(key, '').lower()
    if default:
        return value not in ('false', '0', 'no', 'off')
    else:
        return value in ('true', '1', 'yes', 'on')


def get_int_env(key: str, default: int = 0) -> int:
    """Get integer environment variable"""
    try:
        return int(os.environ.get(key, str(default)))
    except (ValueError, TypeError):
        return default


# --- Browser Configuration ---
HEADLESS = get_boolean_env('HEADLESS', True)
BROWSER_CHANNEL = get_environment_variable('BROWSER_CHANNEL') or None


@dataclass(frozen=True)
class AppSettings:
    """
    Explicit configuration passed to every component at construction time.

    Built from the process environment by ``from_env``; tests construct it
    directly instead of mutating ``os.environ``.
    """

    email: str = ""
    password: str = ""
    api_key: str = ""
    environment: str = "production"
    api_key_header: str = API_KEY_HEADER
    base_url: str = CHATGPT_BASE_URL
    headless: bool = True
    browser_channel: Optional[str] = None

    navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS
    login_settle_delay_ms: int = LOGIN_SETTLE_DELAY_MS
    login_ready_timeout_ms: int = LOGIN_READY_TIMEOUT_MS
    initial_wait_ms: int = INITIAL_WAIT_MS_BEFORE_POLLING
    response_container_timeout_ms: int = RESPONSE_CONTAINER_TIMEOUT_MS
    polling_interval_ms: int = POLLING_INTERVAL_MS
    poll_limit: int = POLL_LIMIT
    poll_limit_reason: int = POLL_LIMIT_REASON
    stable_repeat_threshold: int = STABLE_REPEAT_THRESHOLD
    click_timeout_ms: int = CLICK_TIMEOUT_MS

    def __post_init__(self):
        if self.poll_limit < 1:
            raise ConfigurationError(f"POLL_LIMIT must be positive, got {self.poll_limit}")
        if self.poll_limit_reason <= self.poll_limit:
            raise ConfigurationError(
                f"POLL_LIMIT_REASON ({self.poll_limit_reason}) must be greater than "
                f"POLL_LIMIT ({self.poll_limit})"
            )
        if self.stable_repeat_threshold < 1:
            raise ConfigurationError(
                f"STABLE_REPEAT_THRESHOLD must be at least 1, got {self.stable_repeat_threshold}"
            )

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Snapshot the current environment into a settings object."""
        return cls(
            email=get_environment_variable('OPENAI_EMAIL'),
            password=get_environment_variable('OPENAI_PASSWORD'),
            api_key=get_environment_variable('ERKUT_API_KEY'),
            environment=get_environment_variable('APP_ENV', 'production').lower(),
            api_key_header=get_environment_variable('API_KEY_HEADER', API_KEY_HEADER),
            base_url=get_environment_variable('CHATGPT_BASE_URL', CHATGPT_BASE_URL).rstrip('/'),
            headless=get_boolean_env('HEADLESS', HEADLESS),
            browser_channel=get_environment_variable('BROWSER_CHANNEL') or BROWSER_CHANNEL,
            navigation_timeout_ms=get_int_env('NAVIGATION_TIMEOUT_MS', NAVIGATION_TIMEOUT_MS),
            login_settle_delay_ms=get_int_env('LOGIN_SETTLE_DELAY_MS', LOGIN_SETTLE_DELAY_MS),
            login_ready_timeout_ms=get_int_env('LOGIN_READY_TIMEOUT_MS', LOGIN_READY_TIMEOUT_MS),
            initial_wait_ms=get_int_env('INITIAL_WAIT_MS_BEFORE_POLLING', INITIAL_WAIT_MS_BEFORE_POLLING),
            response_container_timeout_ms=get_int_env('RESPONSE_CONTAINER_TIMEOUT_MS', RESPONSE_CONTAINER_TIMEOUT_MS),
            polling_interval_ms=get_int_env('POLLING_INTERVAL_MS', POLLING_INTERVAL_MS),
            poll_limit=get_int_env('POLL_LIMIT', POLL_LIMIT),
            poll_limit_reason=get_int_env('POLL_LIMIT_REASON', POLL_LIMIT_REASON),
            stable_repeat_threshold=get_int_env('STABLE_REPEAT_THRESHOLD', STABLE_REPEAT_THRESHOLD),
            click_timeout_ms=get_int_env('CLICK_TIMEOUT_MS', CLICK_TIMEOUT_MS),
        )

    @property
    def is_permissive(self) -> bool:
        """Development mode admits every API request without a key."""
        return self.environment == DEVELOPMENT_ENV

    def poll_budget(self, reason: bool) -> int:
        return self.poll_limit_reason if reason else self.poll_limit

    def require_credentials(self) -> None:
        missing = [
            name
            for name, value in (("OPENAI_EMAIL", self.email), ("OPENAI_PASSWORD", self.password))
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing login credentials: {', '.join(missing)}")
