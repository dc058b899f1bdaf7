# gateway/routers/__init__.py

from . import collections, system

__all__ = ["collections", "system"]
