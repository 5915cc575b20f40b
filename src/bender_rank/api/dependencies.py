"""Shared API dependencies."""

from bender_rank.catalog import get_catalog
from bender_rank.scoring.models import Product


def get_products() -> list[Product]:
    """Catalog dependency; tests override it with a fixed product list."""
    return get_catalog()
