# gateway/database/__init__.py

from .connection import MongoDB
from .collections import UpdateOutcome, resolve_collection, list_all, insert, update

__all__ = ["MongoDB", "UpdateOutcome", "resolve_collection", "list_all", "insert", "update"]
