# gateway/dependencies.py

from typing import Optional
from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from .database.connection import MongoDB
from .database.collections import resolve_collection


def get_mongodb(request: Request) -> Optional[MongoDB]:
    """Connection resource attached to the application at startup"""
    return getattr(request.app.state, "mongodb", None)


def get_database(
    mongodb: Optional[MongoDB] = Depends(get_mongodb),
) -> Optional[AsyncIOMotorDatabase]:
    if mongodb is None:
        return None
    return mongodb.database


def get_collection(
    collection_name: str,
    database: Optional[AsyncIOMotorDatabase] = Depends(get_database),
) -> AsyncIOMotorCollection:
    """Resolve the ``collection_name`` path parameter to a live collection"""
    return resolve_collection(database, collection_name)
