"""
Small page-level helpers shared by the login flow and the page controller.
"""

import asyncio
import logging
import os
import time
from typing import Optional

from playwright.async_api import Page as AsyncPage

from config import ERROR_SNAPSHOT_DIR, THREAD_ID_PATTERN, THREAD_PATH_SEGMENT

logger = logging.getLogger("BrowserOperations")


def resolve_thread_url(base_url: str, thread_id: Optional[str]) -> str:
    """Fresh conversation at ``base_url``, or the existing thread page."""
    base = base_url.rstrip("/")
    if not thread_id:
        return base
    return f"{base}/{THREAD_PATH_SEGMENT}/{thread_id}"


def extract_thread_id(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    match = THREAD_ID_PATTERN.search(url)
    return match.group(1) if match else None


async def save_error_snapshot(page: Optional[AsyncPage], error_name: str = "error") -> Optional[str]:
    """Save a full-page screenshot for post-mortem debugging. Never raises."""
    if page is None or page.is_closed():
        logger.warning(f"Cannot save snapshot '{error_name}': page unavailable.")
        return None

    os.makedirs(ERROR_SNAPSHOT_DIR, exist_ok=True)
    timestamp = time.strftime("%Y%m%d_%H%M%S")
    path = os.path.join(ERROR_SNAPSHOT_DIR, f"{error_name}_{timestamp}.png")
    try:
        await page.screenshot(path=path, full_page=True, timeout=15000)
        logger.info(f"📸 Error snapshot saved: {path}")
        return path
    except asyncio.CancelledError:
        raise
    except Exception as e:
        logger.error(f"Failed to save error snapshot '{error_name}': {e}")
        return None
