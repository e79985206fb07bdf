from .client import API_PREFIX, PlaneClient
from .errors import body_snippet, error_for_status

__all__ = [
    'API_PREFIX',
    'PlaneClient',
    'body_snippet',
    'error_for_status',
]
