from .app import create_app, lifespan
from .auth import is_request_admitted, verify_api_key

__all__ = [
    'create_app',
    'is_request_admitted',
    'lifespan',
    'verify_api_key',
]
