import json
from typing import Any, Dict, List

import pytest

from config import REQUIRED_KEYS, JournalConfig
from journal_tools import media_upload


ENV = {
    "MONGO_URI": "mongodb://localhost:27017",
    "MONGO_DB": "journal",
    "MONGO_COLLECTION": "entries",
    "CLOUDINARY_ID": "demo-cloud",
    "CLOUDINARY_API_KEY": "key-123",
    "CLOUDINARY_PRESET": "unsigned-preset",
}


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class FakePost:
    """Stands in for requests.post and records every call."""

    def __init__(self, response: Any = None) -> None:
        self.response = response or FakeResponse(200, json.dumps({"secure_url": "https://host/x.jpg"}))
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, url, data=None, files=None, **kwargs):
        upload = files["file"]
        self.calls.append(
            {
                "url": url,
                "data": data,
                "filename": upload[0],
                "content": upload[1].read(),
                "kwargs": kwargs,
            }
        )
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


class FakeInsertResult:
    def __init__(self, inserted_id: Any) -> None:
        self.inserted_id = inserted_id


class FakeCollection:
    def __init__(self, client: "FakeMongoClient", db: str, name: str) -> None:
        self.client = client
        self.db = db
        self.name = name

    def insert_one(self, doc):
        if self.client.insert_error is not None:
            raise self.client.insert_error
        self.client.inserted.append((self.db, self.name, dict(doc)))
        doc["_id"] = "fake-id"
        return FakeInsertResult("fake-id")


class FakeDatabase:
    def __init__(self, client: "FakeMongoClient", name: str) -> None:
        self.client = client
        self.name = name

    def __getitem__(self, name: str) -> FakeCollection:
        return FakeCollection(self.client, self.name, name)


class FakeMongoClient:
    """Stands in for pymongo.MongoClient; instances share state through the factory."""

    def __init__(self, factory: "FakeMongoFactory", uri: str) -> None:
        self.uri = uri
        self.inserted = factory.inserted
        self.insert_error = factory.insert_error
        self.factory = factory

    def __getitem__(self, name: str) -> FakeDatabase:
        return FakeDatabase(self, name)

    def close(self) -> None:
        self.factory.closed += 1


class FakeMongoFactory:
    def __init__(self) -> None:
        self.uris: List[str] = []
        self.inserted: List[Any] = []
        self.insert_error = None
        self.connect_error = None
        self.closed = 0

    def __call__(self, uri: str) -> FakeMongoClient:
        self.uris.append(uri)
        if self.connect_error is not None:
            raise self.connect_error
        return FakeMongoClient(self, uri)


@pytest.fixture
def env(monkeypatch):
    for key, value in ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("MEDIA_JOURNAL_WORKSPACE", raising=False)
    return dict(ENV)


@pytest.fixture
def clean_env(monkeypatch):
    for key in REQUIRED_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("MEDIA_JOURNAL_WORKSPACE", raising=False)


@pytest.fixture
def journal_config() -> JournalConfig:
    return JournalConfig(
        mongo_uri=ENV["MONGO_URI"],
        mongo_db=ENV["MONGO_DB"],
        mongo_collection=ENV["MONGO_COLLECTION"],
        cloudinary_id=ENV["CLOUDINARY_ID"],
        cloudinary_api_key=ENV["CLOUDINARY_API_KEY"],
        cloudinary_preset=ENV["CLOUDINARY_PRESET"],
    )


@pytest.fixture
def fake_post(monkeypatch) -> FakePost:
    post = FakePost()
    monkeypatch.setattr(media_upload.requests, "post", post)
    return post


@pytest.fixture
def fake_mongo() -> FakeMongoFactory:
    return FakeMongoFactory()


@pytest.fixture
def photo(tmp_path):
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8jpeg-bytes")
    return path
