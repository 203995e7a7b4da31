"""
Timeout and timing configuration module.
All waits, settle delays and polling budgets used while driving the browser.
"""

import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()

# --- Navigation ---
NAVIGATION_TIMEOUT_MS = int(os.environ.get('NAVIGATION_TIMEOUT_MS', '120000'))  # page.goto upper bound

# --- Login Flow ---
LOGIN_SETTLE_DELAY_MS = int(os.environ.get('LOGIN_SETTLE_DELAY_MS', '5000'))  # pause between login steps for redirects
LOGIN_READY_TIMEOUT_MS = int(os.environ.get('LOGIN_READY_TIMEOUT_MS', '30000'))  # wait for the prompt editor after login

# --- Response Location ---
INITIAL_WAIT_MS_BEFORE_POLLING = int(os.environ.get('INITIAL_WAIT_MS_BEFORE_POLLING', '1000'))
RESPONSE_CONTAINER_TIMEOUT_MS = int(os.environ.get('RESPONSE_CONTAINER_TIMEOUT_MS', '30000'))

# --- Stabilization Polling ---
POLLING_INTERVAL_MS = int(os.environ.get('POLLING_INTERVAL_MS', '1000'))
POLL_LIMIT = int(os.environ.get('POLL_LIMIT', '300'))  # ~5 minutes at the default interval
POLL_LIMIT_REASON = int(os.environ.get('POLL_LIMIT_REASON', '600'))  # ~10 minutes, reasoning replies take longer
STABLE_REPEAT_THRESHOLD = int(os.environ.get('STABLE_REPEAT_THRESHOLD', '1'))

# --- Clicks ---
CLICK_TIMEOUT_MS = int(os.environ.get('CLICK_TIMEOUT_MS', '5000'))
