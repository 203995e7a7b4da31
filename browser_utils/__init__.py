from .cleaner import CitationPolicy, clean_response
from .login import SessionAuthenticator
from .operations import extract_thread_id, resolve_thread_url, save_error_snapshot
from .page_controller import PageController
from .session import BrowserSession
from .stabilizer import ResponseStabilizer, StabilizationResult

__all__ = [
    'BrowserSession',
    'CitationPolicy',
    'PageController',
    'ResponseStabilizer',
    'SessionAuthenticator',
    'StabilizationResult',
    'clean_response',
    'extract_thread_id',
    'resolve_thread_url',
    'save_error_snapshot',
]
