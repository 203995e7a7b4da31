from .context import RequestIdFilter, get_request_id, random_id, set_request_id
from .setup import SERVER_LOGGER_NAME, setup_server_logging

__all__ = [
    'RequestIdFilter',
    'SERVER_LOGGER_NAME',
    'get_request_id',
    'random_id',
    'set_request_id',
    'setup_server_logging',
]
