"""Tests for catalog loading."""

import json

import pytest

from bender_rank.catalog import (
    SAMPLE_CATALOG,
    CatalogError,
    find_product,
    get_catalog,
    load_catalog,
    parse_catalog,
)


class TestParseCatalog:
    def test_sample_catalog(self) -> None:
        products = parse_catalog(SAMPLE_CATALOG)
        assert len(products) == 12
        assert [p.id for p in products] == list(range(1, 13))

    def test_invalid_record(self) -> None:
        with pytest.raises(CatalogError, match="Invalid catalog data"):
            parse_catalog([{"id": "not-a-number", "name": "Broken"}])

    def test_negative_bend_angle_rejected(self) -> None:
        record = dict(SAMPLE_CATALOG[0], bend_angle=-10)
        with pytest.raises(CatalogError):
            parse_catalog([record])


class TestLoadCatalog:
    """Tests for JSON catalog files."""

    def test_camel_case_export(self, tmp_path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "id": 7,
                        "name": "Shop Bender",
                        "brand": "JD2",
                        "priceRange": "$1,545 - $1,895",
                        "priceMin": 1545,
                        "maxCapacity": '2" OD',
                        "powerType": "Manual",
                        "bendAngle": 180,
                        "countryOfOrigin": "USA",
                        "category": "budget",
                        "wallThicknessCapacity": 0.12,
                        "sBendCapability": False,
                    }
                ]
            )
        )

        products = load_catalog(path)
        assert len(products) == 1
        product = products[0]
        assert product.price_min == "1545"
        assert product.wall_thickness_capacity == "0.12"
        assert product.is_usa_made

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(CatalogError, match="Cannot read catalog"):
            load_catalog(tmp_path / "missing.json")

    def test_bad_json(self, tmp_path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text("[{not json")
        with pytest.raises(CatalogError, match="not valid JSON"):
            load_catalog(path)

    def test_not_a_list(self, tmp_path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"products": []}))
        with pytest.raises(CatalogError, match="JSON array"):
            load_catalog(path)

    def test_get_catalog_prefers_path(self, tmp_path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(SAMPLE_CATALOG[:2]))
        assert [p.id for p in get_catalog(str(path))] == [1, 2]

    def test_get_catalog_defaults_to_sample(self) -> None:
        assert len(get_catalog()) == 12


class TestFindProduct:
    def test_found(self, catalog) -> None:
        assert find_product(catalog, 12).brand == "SWAG Off Road"

    def test_missing(self, catalog) -> None:
        assert find_product(catalog, 404) is None
