"""Shared pytest fixtures."""

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from bender_rank.api.app import app
from bender_rank.api.dependencies import get_products
from bender_rank.catalog import SAMPLE_CATALOG, parse_catalog
from bender_rank.scoring.models import Product


def build_product(**overrides: Any) -> Product:
    """Build a product that matches no special tier unless overridden.

    Defaults score 29 points: Manual ease 8, small capacity 4, 180° angle 8,
    no wall data 3, generic dies 3, unknown brand years 3.
    """
    data: dict[str, Any] = {
        "id": 1,
        "name": "Generic Bender",
        "brand": "Generic",
        "model": "G1",
        "rating": "7.0",
        "price_range": "$2,000 - $2,500",
        "max_capacity": '1" OD',
        "power_type": "Manual",
        "bend_angle": 180,
        "country_of_origin": "China",
        "category": "budget",
    }
    data.update(overrides)
    return Product(**data)


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory fixture for products."""
    return build_product


@pytest.fixture
def catalog() -> list[Product]:
    """The bundled sample catalog."""
    return parse_catalog(SAMPLE_CATALOG)


@pytest.fixture
def rogue_fab(catalog: list[Product]) -> Product:
    """RogueFab M6xx: the highest-scoring sample product (89 points)."""
    return next(p for p in catalog if p.brand == "RogueFab")


@pytest.fixture
def api_catalog(catalog: list[Product]) -> Iterator[list[Product]]:
    """Serve the sample catalog through the API's catalog dependency."""
    app.dependency_overrides[get_products] = lambda: catalog
    try:
        yield catalog
    finally:
        app.dependency_overrides.clear()
