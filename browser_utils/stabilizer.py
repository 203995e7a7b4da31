"""
Response stabilization.

The chat UI streams tokens into the DOM without a "done" event, so a reply is
considered finished once consecutive samples of its text stop changing.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from config import POLL_PREVIEW_CHARS

logger = logging.getLogger("ResponseStabilizer")

Sampler = Callable[[], Awaitable[str]]


@dataclass(frozen=True)
class StabilizationResult:
    text: Optional[str]
    stable: bool
    polls: int


def _preview(text: str) -> str:
    return f"{text[:POLL_PREVIEW_CHARS]}…" if text else "[empty]"


class ResponseStabilizer:
    """Polls a text sampler until the reply stops changing or the budget runs out.

    A sample counts as a repeat only when it is non-empty and identical to the
    previous one. ``stable_repeats`` repeats in a row end the loop successfully;
    the default of one means two identical consecutive samples.
    """

    def __init__(
        self,
        poll_interval: float = 1.0,
        stable_repeats: int = 1,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        req_id: str = "",
    ):
        if stable_repeats < 1:
            raise ValueError("stable_repeats must be at least 1")
        self.poll_interval = poll_interval
        self.stable_repeats = stable_repeats
        self._sleep = sleep
        self.req_id = req_id

    async def _read(self, sample: Sampler) -> str:
        try:
            text = await sample()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            # The node can detach between lookup and read while the UI re-renders
            logger.debug(f"[{self.req_id}] Sample read failed, treating as empty: {e}")
            return ""
        return text or ""

    async def wait_until_stable(self, sample: Sampler, max_polls: int) -> StabilizationResult:
        if max_polls < 1:
            raise ValueError("max_polls must be at least 1")

        logger.info(f"[{self.req_id}] 🕒 Polling response until stable (budget {max_polls} polls)...")
        previous = ""
        repeats = 0

        for poll in range(1, max_polls + 1):
            current = await self._read(sample)
            logger.debug(f"[{self.req_id}] 🕒 Poll #{poll}: {_preview(current)}")

            if current and current == previous:
                repeats += 1
                if repeats >= self.stable_repeats:
                    logger.info(
                        f"[{self.req_id}] ✅ Response stable after {poll} polls ({len(current)} chars)."
                    )
                    return StabilizationResult(text=current, stable=True, polls=poll)
            else:
                repeats = 0

            previous = current
            if poll < max_polls:
                await self._sleep(self.poll_interval)

        logger.warning(
            f"[{self.req_id}] ⚠️ Response never stabilized after {max_polls} polls; "
            "returning last received text (if any)."
        )
        return StabilizationResult(text=previous or None, stable=False, polls=max_polls)
