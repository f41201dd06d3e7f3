"""Test fixtures and configuration for the comparison API tests."""
import os

import pytest


def pytest_configure(config):
    """Run against the bundled city data, never a real Firestore project."""
    os.environ["FIREBASE_CREDENTIALS"] = ""
    os.environ["SITE_BASE_URL"] = "https://staykedarnath.in"
    os.environ["LOG_LEVEL"] = "WARNING"


from fastapi.testclient import TestClient

from models.schemas import LocationRecord


@pytest.fixture
def client() -> TestClient:
    from main import app
    return TestClient(app)


@pytest.fixture
def make_city():
    """Factory for LocationRecords with only the fields a test cares about."""
    def _make(slug: str, distance: str = "10 km", price: str = "₹2,000", **extra) -> LocationRecord:
        return LocationRecord(
            slug=slug,
            name=extra.pop("name", slug.title()),
            distance_from_kedarnath=distance,
            avg_hotel_price=price,
            **extra,
        )
    return _make


class FakeDoc:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data
        self.exists = data is not None

    def to_dict(self):
        return self._data


class FakeCollection:
    def __init__(self, docs, fail=False):
        self._docs = docs
        self._fail = fail

    def stream(self):
        if self._fail:
            raise RuntimeError("firestore unavailable")
        return iter(FakeDoc(k, v) for k, v in self._docs.items())

    def where(self, filter):
        assert filter.op_string == "=="
        matching = {
            k: v for k, v in self._docs.items()
            if v is not None and v.get(filter.field_path) == filter.value
        }
        return FakeCollection(matching, fail=self._fail)

    def limit(self, count):
        return FakeCollection(dict(list(self._docs.items())[:count]), fail=self._fail)

    def document(self, doc_id):
        collection = self

        class _Ref:
            def get(self):
                if collection._fail:
                    raise RuntimeError("firestore unavailable")
                return FakeDoc(doc_id, collection._docs.get(doc_id))
        return _Ref()


class FakeFirestore:
    """Just enough of firestore.Client for the city service."""

    def __init__(self, docs, fail=False):
        self.collections = {}
        self._docs = docs
        self._fail = fail

    def collection(self, name):
        self.collections[name] = True
        return FakeCollection(self._docs, fail=self._fail)


@pytest.fixture
def fake_firestore(monkeypatch):
    """Patch the city service onto an in-memory Firestore stand-in."""
    def _install(docs, fail=False):
        fake = FakeFirestore(docs, fail=fail)
        monkeypatch.setattr("services.city_service.db", fake)
        return fake
    return _install
