# gateway/database/collections.py

# ==============================================================================
# Generic collection operations: resolve a collection by name, then read,
# insert or partially update its documents. Driver failures are logged and
# mapped to the gateway error taxonomy.
# ==============================================================================

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import BSONError, InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import InvalidName, PyMongoError

from ..utils.exceptions import (
    CollectionAccessError,
    FetchError,
    InsertError,
    InvalidIdError,
    UpdateError,
)

logger = logging.getLogger(__name__)


class UpdateOutcome(str, Enum):
    UPDATED = "updated"
    NOT_FOUND = "not_found"


def resolve_collection(
    database: Optional[AsyncIOMotorDatabase], name: str
) -> AsyncIOMotorCollection:
    """Look up the named collection on the active database"""
    if database is None:
        logger.error(f"No database connection while resolving collection '{name}'")
        raise CollectionAccessError()

    try:
        return database.get_collection(name)
    except InvalidName as e:
        logger.error(f"Cannot access collection '{name}': {e}")
        raise CollectionAccessError() from e


async def list_all(collection: AsyncIOMotorCollection) -> List[Dict[str, Any]]:
    """Return every document in the collection"""
    try:
        return await collection.find({}).to_list(length=None)
    except (PyMongoError, BSONError) as e:
        logger.error(f"Error fetching documents from {collection.name}: {e}")
        raise FetchError() from e


async def insert(collection: AsyncIOMotorCollection, document: Dict[str, Any]) -> Any:
    """Insert the document as given and return its new id"""
    try:
        result = await collection.insert_one(document)
    except (PyMongoError, BSONError, OverflowError) as e:
        logger.error(f"Error saving data to {collection.name}: {e}")
        raise InsertError() from e

    logger.info(f"Inserted document {result.inserted_id} into {collection.name}")
    return result.inserted_id


def parse_object_id(document_id: str) -> ObjectId:
    try:
        return ObjectId(document_id)
    except (InvalidId, TypeError) as e:
        raise InvalidIdError() from e


async def update(
    collection: AsyncIOMotorCollection, document_id: str, patch: Dict[str, Any]
) -> UpdateOutcome:
    """Set the patch fields on the matching document, leaving the rest intact"""
    object_id = parse_object_id(document_id)

    try:
        result = await collection.update_one({"_id": object_id}, {"$set": patch})
    except (PyMongoError, BSONError, OverflowError) as e:
        logger.error(f"Error updating document {document_id} in {collection.name}: {e}")
        raise UpdateError() from e

    if result.matched_count == 0:
        return UpdateOutcome.NOT_FOUND
    return UpdateOutcome.UPDATED
