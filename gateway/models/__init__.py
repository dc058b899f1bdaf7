# gateway/models/__init__.py

from .document import (
    DocumentBody,
    DocumentPatch,
    InsertResponse,
    UpdateResponse,
    encode_documents,
    encode_value,
)

__all__ = [
    "DocumentBody",
    "DocumentPatch",
    "InsertResponse",
    "UpdateResponse",
    "encode_documents",
    "encode_value",
]
