"""
Constant Configuration Module
Fixed values describing the target chat UI and the relay's HTTP contract.
"""

import os
import re

from dotenv import load_dotenv

load_dotenv()

# --- Target Site ---
CHATGPT_BASE_URL = os.environ.get("CHATGPT_BASE_URL", "https://chatgpt.com").rstrip("/")
THREAD_PATH_SEGMENT = "c"
THREAD_ID_PATTERN = re.compile(r"/c/([0-9a-f\-]+)")

# --- Prompt Shaping ---
# Sent ahead of every prompt so the reply comes back without source links.
NO_SOURCES_PROMPT_PREFIX = (
    "return the response to the below prompt excluding all the sources with "
    "links mentioned in the response anywhere. Prompt as follows: "
)

# --- API Gatekeeper ---
API_KEY_HEADER = os.environ.get("API_KEY_HEADER", "ERKUT-API-KEY")
INVALID_API_KEY_MESSAGE = "invalid api key"
DEVELOPMENT_ENV = "development"

# --- Logging ---
POLL_PREVIEW_CHARS = 50
