"""
CSS Selector Configuration Module
Contains all selectors and accessible names used for page element location.
"""

# --- Login Selectors ---
LOGIN_BUTTON_NAME = "Log in"
CONTINUE_BUTTON_NAME = "Continue"
EMAIL_INPUT_SELECTOR = 'input[name="email"]'
PASSWORD_INPUT_SELECTOR = 'input[name="password"]'
LOGIN_SUBMIT_BUTTON_SELECTOR = 'button[type="submit"]'

# --- Input Related Selectors ---
PROMPT_TEXTAREA_SELECTOR = "#prompt-textarea"

# --- Mode Toggle Names ---
REASON_TOGGLE_NAME = "Reason"
SEARCH_TOGGLE_NAME = "Search"

# --- Response Selectors ---
RESPONSE_CONTAINER_SELECTOR = "article"
RESPONSE_ID_ATTRIBUTE = "data-testid"
RESPONSE_TEXT_SELECTOR = "div.markdown"

# --- Citation Markup ---
CITATION_SELECTOR = (
    '[data-testid="webpage-citation-pill"], '
    "a.citation, "
    'span[class*="citation"], '
    'sup[class*="citation"]'
)
