# gateway/utils/exceptions.py

import logging

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from .responses import PrettyJSONResponse

logger = logging.getLogger(__name__)


class GatewayAPIException(HTTPException):
    """Base gateway exception.

    Clients only ever see ``{"error": detail}``; ``error_code`` is only
    written to the log.
    """

    def __init__(self, status_code: int, detail: str, error_code: str = None):
        super().__init__(status_code=status_code, detail=detail)
        self.error_code = error_code or self.__class__.__name__.upper()

    def to_dict(self):
        return {"error": self.detail}


class CollectionAccessError(GatewayAPIException):
    """The collection could not be resolved on the active connection"""

    def __init__(self, detail: str = "Failed to access collection"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code="COLLECTION_ACCESS_ERROR",
        )


class FetchError(GatewayAPIException):
    def __init__(self, detail: str = "Failed to fetch documents"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code="FETCH_ERROR",
        )


class InsertError(GatewayAPIException):
    def __init__(self, detail: str = "Failed to save data"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code="INSERT_ERROR",
        )


class UpdateError(GatewayAPIException):
    def __init__(self, detail: str = "Failed to update document"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code="UPDATE_ERROR",
        )


class DocumentNotFoundError(GatewayAPIException):
    """No document matched the given id"""

    def __init__(self, detail: str = "Document not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="DOCUMENT_NOT_FOUND",
        )


class ServiceUnavailableError(GatewayAPIException):
    def __init__(self, detail: str = "Service temporarily unavailable"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
            error_code="SERVICE_UNAVAILABLE",
        )


class InvalidIdError(GatewayAPIException):
    """The id is not a 24-hex-character ObjectId"""

    def __init__(self, detail: str = "Invalid document id"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="INVALID_ID",
        )


async def gateway_exception_handler(
    request: Request, exc: GatewayAPIException
) -> JSONResponse:
    logger.warning(
        f"{exc.error_code} on {request.method} {request.url.path}: {exc.detail}"
    )
    return PrettyJSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app) -> None:
    app.add_exception_handler(GatewayAPIException, gateway_exception_handler)
