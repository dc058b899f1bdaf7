# gateway/routers/system.py

import logging
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Depends

from ..database.connection import MongoDB
from ..dependencies import get_mongodb
from ..utils.exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check(mongodb: Optional[MongoDB] = Depends(get_mongodb)):
    """Health check: the process is up and the database answers a ping"""
    db_healthy = mongodb is not None and await mongodb.health_check()

    if not db_healthy:
        logger.warning("Health check failed: database unreachable")
        raise ServiceUnavailableError("Database unavailable")

    return {
        "status": "healthy",
        "database": mongodb.database_name,
        "timestamp": datetime.now(timezone.utc),
    }
