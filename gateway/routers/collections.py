# gateway/routers/collections.py

# ==============================================================================
# Generic CRUD endpoints forwarding straight to the named collection.
# ==============================================================================

import logging
from typing import Any, Dict, List
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorCollection

from ..database import collections as store
from ..database.collections import UpdateOutcome
from ..dependencies import get_collection
from ..models.document import (
    DocumentBody,
    DocumentPatch,
    InsertResponse,
    UpdateResponse,
    encode_documents,
    encode_value,
)
from ..utils.exceptions import DocumentNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/collections", tags=["Collections"])


@router.get("/{collection_name}", response_model=List[Dict[str, Any]])
async def list_documents(
    collection: AsyncIOMotorCollection = Depends(get_collection),
):
    """Get all documents from a collection"""
    documents = await store.list_all(collection)
    return encode_documents(documents)


@router.post(
    "/{collection_name}",
    response_model=InsertResponse,
    status_code=status.HTTP_201_CREATED,
)
async def insert_document(
    document: DocumentBody,
    collection: AsyncIOMotorCollection = Depends(get_collection),
):
    """Add a new document"""
    inserted_id = await store.insert(collection, document.root)
    return InsertResponse(id=encode_value(inserted_id))


@router.put("/{collection_name}/{document_id}", response_model=UpdateResponse)
async def update_document(
    document_id: str,
    patch: DocumentPatch,
    collection: AsyncIOMotorCollection = Depends(get_collection),
):
    """Set the given fields on one document"""
    outcome = await store.update(collection, document_id, patch.root)
    if outcome is UpdateOutcome.NOT_FOUND:
        raise DocumentNotFoundError()

    logger.info(f"Updated document {document_id} in {collection.name}")
    return UpdateResponse()
