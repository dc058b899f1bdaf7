"""
Shared fixtures: an in-memory stand-in for the MongoDB connection resource,
injected into the application through ``create_app``.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import bson
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import AutoReconnect, InvalidName
from pymongo.results import InsertOneResult, UpdateResult

from gateway.config import Settings
from gateway.main import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"
ALLOWED_ORIGIN = "https://patiencevelma.github.io"


class FakeCursor:
    def __init__(self, collection: "FakeCollection", query: dict):
        self._collection = collection
        self._query = query

    async def to_list(self, length=None) -> list[dict]:
        self._collection.check()
        return [copy.deepcopy(doc) for doc in self._collection.documents]


class FakeCollection:
    def __init__(self, name: str, error: Exception | None = None):
        self.name = name
        self.error = error
        self.documents: list[dict[str, Any]] = []

    def check(self) -> None:
        if self.error is not None:
            raise self.error

    def find(self, query: dict) -> FakeCursor:
        return FakeCursor(self, query)

    async def insert_one(self, document: dict) -> InsertOneResult:
        self.check()
        document.setdefault("_id", ObjectId())
        # The driver encodes to BSON before sending, so the same errors surface
        bson.encode(document)
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    async def update_one(self, query: dict, update: dict) -> UpdateResult:
        self.check()
        bson.encode(update)
        matched = 0
        for doc in self.documents:
            if doc["_id"] == query["_id"]:
                doc.update(copy.deepcopy(update["$set"]))
                matched = 1
                break
        return UpdateResult({"n": matched, "nModified": matched, "ok": 1.0}, True)


class FakeDatabase:
    def __init__(self, failing: set[str] | None = None, crashing: set[str] | None = None):
        self.failing = failing or set()
        self.crashing = crashing or set()
        self.collections: dict[str, FakeCollection] = {}

    def get_collection(self, name: str) -> FakeCollection:
        # Same rules pymongo applies to collection names
        if not name or "$" in name or ".." in name or name[0] == "." or name[-1] == ".":
            raise InvalidName(f"collection name '{name}' is invalid")
        if name not in self.collections:
            error = None
            if name in self.failing:
                error = AutoReconnect("connection reset")
            elif name in self.crashing:
                error = RuntimeError("driver bug")
            self.collections[name] = FakeCollection(name, error)
        return self.collections[name]


class FakeMongoDB:
    def __init__(
        self,
        connect_error: Exception | None = None,
        failing: set[str] | None = None,
        crashing: set[str] | None = None,
    ):
        self.database_name = "webstore"
        self.database: FakeDatabase | None = None
        self.healthy = True
        self.connect_error = connect_error
        self.failing = failing
        self.crashing = crashing
        self.disconnected = False

    @property
    def is_connected(self) -> bool:
        return self.database is not None

    async def connect(self) -> None:
        if self.connect_error is not None:
            raise self.connect_error
        self.database = FakeDatabase(self.failing, self.crashing)

    async def disconnect(self) -> None:
        self.database = None
        self.disconnected = True

    async def health_check(self) -> bool:
        return self.is_connected and self.healthy


@pytest.fixture
def images_dir(tmp_path: Path) -> Path:
    path = tmp_path / "images"
    path.mkdir()
    (path / "lesson.png").write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def settings(tmp_path: Path, images_dir: Path) -> Settings:
    return Settings(
        db_properties_file=str(tmp_path / "missing.properties"),
        db_prefix="mongodb://",
        db_host="@localhost:27017",
        db_name="webstore",
        db_user="user",
        db_password="secret",
        db_params="/?authSource=admin",
        cors_origin=ALLOWED_ORIGIN,
        images_dir=str(images_dir),
        static_dir=None,
    )


@pytest.fixture
def mongodb() -> FakeMongoDB:
    return FakeMongoDB(failing={"broken"}, crashing={"haunted"})


@pytest.fixture
def client(settings: Settings, mongodb: FakeMongoDB):
    app = create_app(settings=settings, mongodb=mongodb)
    with TestClient(app) as test_client:
        yield test_client
