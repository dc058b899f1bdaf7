# gateway/utils/__init__.py

"""
Gateway utilities

- exceptions.py: error taxonomy and its HTTP rendering
- responses.py: JSON response formatting
"""

from .exceptions import (
    GatewayAPIException,
    CollectionAccessError,
    FetchError,
    InsertError,
    UpdateError,
    DocumentNotFoundError,
    InvalidIdError,
    ServiceUnavailableError,
    register_exception_handlers,
)
from .responses import PrettyJSONResponse

__all__ = [
    "GatewayAPIException",
    "CollectionAccessError",
    "FetchError",
    "InsertError",
    "UpdateError",
    "DocumentNotFoundError",
    "InvalidIdError",
    "ServiceUnavailableError",
    "register_exception_handlers",
    "PrettyJSONResponse",
]
