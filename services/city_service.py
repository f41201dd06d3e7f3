# City Service: route cities from Firebase Firestore
#
# Source order:
#   1. Firestore `cities` collection, when credentials are configured
#   2. Bundled data/cities.py otherwise, or when Firestore is unreachable
#
# Lookup by slug queries the `slug` field first (auto-id documents), then
# falls back to the document id (documents keyed by slug).
# Documents that fail validation are skipped, never returned half-parsed.

import logging
from functools import lru_cache
from typing import Dict, List, Optional, Tuple
from pydantic import ValidationError
from google.cloud.firestore_v1.base_query import FieldFilter
from config import db, CITIES_COLLECTION
from data.cities import CITIES
from models.schemas import LocationRecord

logger = logging.getLogger(__name__)


# ── Helpers ─────────────────────────────────────────────────────────────────────

def _get_cities_ref():
    return db.collection(CITIES_COLLECTION)


def _to_record(raw: Dict, slug: Optional[str] = None) -> Optional[LocationRecord]:
    """Validate a raw city dict. Firestore doc id fills in a missing slug."""
    data = dict(raw)
    if slug and not data.get("slug"):
        data["slug"] = slug
    try:
        return LocationRecord.model_validate(data)
    except ValidationError as exc:
        logger.warning("Skipping invalid city record %r: %s", data.get("slug"), exc)
        return None


@lru_cache(maxsize=1)
def _bundled_cities() -> Tuple[LocationRecord, ...]:
    """Bundled dataset, validated once per process."""
    records = [_to_record(c) for c in CITIES]
    return tuple(r for r in records if r is not None)


def _bundled_city(slug: str) -> Optional[LocationRecord]:
    return next((c for c in _bundled_cities() if c.slug == slug), None)


def _find_by_slug_field(slug: str):
    query = _get_cities_ref().where(filter=FieldFilter("slug", "==", slug)).limit(1)
    return next(iter(query.stream()), None)


# ── Public API ──────────────────────────────────────────────────────────────────

def list_cities() -> List[LocationRecord]:
    """All route cities, in source order."""
    if db is None:
        return list(_bundled_cities())

    try:
        docs = _get_cities_ref().stream()
        records = [_to_record(doc.to_dict() or {}, slug=doc.id) for doc in docs]
    except Exception:
        logger.warning("Firestore city listing failed, using bundled cities", exc_info=True)
        return list(_bundled_cities())

    return [r for r in records if r is not None]


def get_city(slug: str) -> Optional[LocationRecord]:
    """Single city by slug, or None if it does not exist."""
    if db is None:
        return _bundled_city(slug)

    try:
        doc = _find_by_slug_field(slug)
        if doc is None:
            doc = _get_cities_ref().document(slug).get()
    except Exception:
        logger.warning("Firestore lookup for %r failed, using bundled cities", slug, exc_info=True)
        return _bundled_city(slug)

    if not doc.exists:
        return None
    return _to_record(doc.to_dict() or {}, slug=doc.id)
