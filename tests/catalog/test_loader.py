"""Tests for loading the catalog document."""
import json
import logging

import pytest

from caveo.catalog import load_catalog, parse_catalog_document
from caveo.exceptions import CatalogLoadError
from caveo.utils import BUNDLED_CATALOG_PATH

_DOCUMENT = {
    "wines": [
        {
            "id": "1",
            "producer": "Moric",
            "name": "Alte Reben",
            "vintage": 2017,
            "style": "red",
            "region": "Burgenland",
            "appellation": "Mittelburgenland",
            "country": "Austria",
            "grapes": ["Blaufränkisch"],
            "abv": 13.0,
            "drink_window": {"from": 2021, "to": None},
            "locations": ["Rack A1"],
            "quantity": 1,
            "price": {"amount": 115.0, "currency": "EUR"},
        }
    ],
    "open_bottles": [{"wine_id": "1", "opened_at": "2024-04-29", "preservation": "vacuum", "days_open": 5}],
    "ratings": [{"wine_id": "1", "stars": 4.5, "notes": "Dark fruit.", "date": "2024-01-02"}],
}


class TestParseCatalogDocument:
    def test_parses_mapping(self):
        catalog = parse_catalog_document(_DOCUMENT)
        wine = catalog.wine("1")
        assert wine.drink_window.from_year == 2021
        assert wine.price.amount == 115.0
        assert catalog.open_bottle(wine).preservation.value == "vacuum"
        assert catalog.average_rating(wine) == 4.5

    def test_parses_json_text(self):
        catalog = parse_catalog_document(json.dumps(_DOCUMENT))
        assert len(catalog.wines) == 1

    def test_invalid_json_raises(self):
        with pytest.raises(CatalogLoadError):
            parse_catalog_document("{not json")

    def test_schema_violation_raises(self):
        document = json.loads(json.dumps(_DOCUMENT))
        document["ratings"][0]["stars"] = 7
        with pytest.raises(CatalogLoadError) as exc_info:
            parse_catalog_document(document, source="broken.json")
        assert "broken.json" in str(exc_info.value)

    def test_dangling_foreign_keys_are_trusted(self):
        document = json.loads(json.dumps(_DOCUMENT))
        document["ratings"].append({"wine_id": "404", "stars": 3.0})
        catalog = parse_catalog_document(document)
        assert len(catalog.ratings) == 2


class TestLoadCatalog:
    def test_loads_bundled_document(self):
        catalog = load_catalog(BUNDLED_CATALOG_PATH)
        assert len(catalog.wines) == 8
        assert len(catalog.open_bottles) == 2
        assert len(catalog.ratings) == 6

    def test_loads_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(_DOCUMENT), encoding="utf-8")
        catalog = load_catalog(path)
        assert [w.id for w in catalog.wines] == ["1"]

    def test_malformed_file_gives_empty_catalog(self, tmp_path, caplog):
        path = tmp_path / "catalog.json"
        path.write_text("{\"wines\": [", encoding="utf-8")
        with caplog.at_level(logging.ERROR, logger="CAVEO"):
            catalog = load_catalog(path)
        assert catalog.is_empty
        assert "Failed to decode catalog" in caplog.text

    def test_invalid_record_gives_empty_catalog(self, tmp_path, caplog):
        document = json.loads(json.dumps(_DOCUMENT))
        document["wines"][0]["quantity"] = -3
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        with caplog.at_level(logging.ERROR, logger="CAVEO"):
            catalog = load_catalog(path)
        assert catalog.is_empty
        assert "Failed to load catalog" in caplog.text

    def test_missing_file_gives_empty_catalog(self, tmp_path):
        assert load_catalog(tmp_path / "missing.json").is_empty

    def test_invalid_utf8_gives_empty_catalog(self, tmp_path, caplog):
        path = tmp_path / "catalog.json"
        path.write_bytes(b'{"wines": [{"id": "1", "producer": "\xff\xfe"}]}')
        with caplog.at_level(logging.ERROR, logger="CAVEO"):
            catalog = load_catalog(path)
        assert catalog.is_empty
        assert "Failed to decode catalog" in caplog.text
