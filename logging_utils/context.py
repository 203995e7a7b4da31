"""Per-request logging context."""

import contextvars
import logging
import random
import string

_request_id: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="-")


def random_id(length: int = 7) -> str:
    """Short request id used to correlate log lines."""
    alphabet = string.ascii_lowercase + string.digits
    return "".join(random.choices(alphabet, k=length))


def set_request_id(req_id: str) -> None:
    """Tag every log record emitted in the current task with ``req_id``."""
    _request_id.set(req_id or "-")


def get_request_id() -> str:
    return _request_id.get()


class RequestIdFilter(logging.Filter):
    """Injects the current request id into records as ``req_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.req_id = _request_id.get()
        return True
