# gateway/models/document.py

from typing import Any, Dict, List

from bson import ObjectId
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field, RootModel, field_validator

# BSON stores signed 64-bit integers
BSON_INT64_MIN = -(2**63)
BSON_INT64_MAX = 2**63 - 1


def coerce_numbers(value: Any) -> Any:
    """Turn integers BSON cannot hold into doubles, as a JSON parser would"""
    if isinstance(value, dict):
        return {key: coerce_numbers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [coerce_numbers(item) for item in value]
    if isinstance(value, int) and not isinstance(value, bool):
        if not BSON_INT64_MIN <= value <= BSON_INT64_MAX:
            try:
                return float(value)
            except OverflowError:
                raise ValueError("Number is too large to store") from None
    return value


class DocumentBody(RootModel[Dict[str, Any]]):
    """Opaque JSON document: any object, stored as given"""

    @field_validator("root")
    @classmethod
    def storable_numbers(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        return coerce_numbers(value)


class DocumentPatch(DocumentBody):
    """Fields to set on an existing document; may be empty"""


class InsertResponse(BaseModel):
    id: Any = Field(..., description="Identifier of the inserted document")


class UpdateResponse(BaseModel):
    message: str = Field("Document updated", description="Outcome message")


def encode_value(value: Any) -> Any:
    """Render a BSON value as JSON-compatible data"""
    return jsonable_encoder(value, custom_encoder={ObjectId: str})


def encode_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return encode_value(documents)
