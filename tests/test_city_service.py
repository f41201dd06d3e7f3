"""Tests for the city service (bundled data and Firestore)."""
from data.cities import CITIES
from services.city_service import _bundled_cities, get_city, list_cities


class TestBundledCities:
    """Without Firestore credentials the bundled dataset is used."""

    def test_list_cities_in_dataset_order(self):
        assert [c.slug for c in list_cities()] == [c["slug"] for c in CITIES]

    def test_get_city(self):
        city = get_city("guptkashi")
        assert city is not None
        assert city.name == "Guptkashi"
        assert city.connectivity.nearest_railway

    def test_get_unknown_city(self):
        assert get_city("atlantis") is None

    def test_bundled_dataset_validated_once(self):
        assert _bundled_cities() is _bundled_cities()

    def test_bundled_slugs_are_unique(self):
        slugs = [c["slug"] for c in CITIES]
        assert len(slugs) == len(set(slugs))


class TestFirestoreCities:
    """With Firestore configured, documents come from the cities collection."""

    def test_list_uses_doc_id_as_missing_slug(self, fake_firestore):
        fake_firestore({
            "kalimath": {"name": "Kalimath", "distance_from_kedarnath": "50 km"},
        })
        cities = list_cities()
        assert [c.slug for c in cities] == ["kalimath"]

    def test_invalid_documents_are_skipped(self, fake_firestore):
        fake_firestore({
            "kalimath": {"name": "Kalimath"},
            "broken": {"images": "not-a-list"},
        })
        assert [c.slug for c in list_cities()] == ["kalimath"]

    def test_get_city(self, fake_firestore):
        fake = fake_firestore({"kalimath": {"slug": "kalimath", "name": "Kalimath"}})
        city = get_city("kalimath")
        assert city.name == "Kalimath"
        assert "cities" in fake.collections

    def test_get_missing_city(self, fake_firestore):
        fake_firestore({})
        assert get_city("kalimath") is None

    def test_get_city_by_slug_field_on_auto_id_document(self, fake_firestore):
        fake_firestore({"Xy12AutoId": {"slug": "kalimath", "name": "Kalimath"}})
        assert [c.slug for c in list_cities()] == ["kalimath"]
        assert get_city("kalimath").name == "Kalimath"

    def test_get_city_falls_back_to_document_id(self, fake_firestore):
        fake_firestore({"kalimath": {"name": "Kalimath"}})
        city = get_city("kalimath")
        assert city.slug == "kalimath"

    def test_listing_falls_back_when_firestore_fails(self, fake_firestore):
        fake_firestore({}, fail=True)
        assert len(list_cities()) == len(CITIES)

    def test_lookup_falls_back_when_firestore_fails(self, fake_firestore):
        fake_firestore({}, fail=True)
        assert get_city("sonprayag").name == "Sonprayag"
