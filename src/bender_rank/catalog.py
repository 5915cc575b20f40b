"""Product catalog access.

The catalog itself is owned by the storage layer; this module only turns
a JSON export (``GET /api/tube-benders`` format, camelCase or snake_case
keys) into ``Product`` models, with a bundled sample catalog for local use.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import TypeAdapter, ValidationError

from bender_rank.config import get_settings
from bender_rank.scoring.models import Product

logger = logging.getLogger(__name__)

_PRODUCT_LIST = TypeAdapter(list[Product])


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or validated."""


SAMPLE_CATALOG: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "RogueFab M6xx Series",
        "brand": "RogueFab",
        "model": "M601/M605/M625",
        "rating": "9.0",
        "price_range": "$1,895 - $2,695",
        "price_min": "1895",
        "price_max": "2695",
        "max_capacity": '2-3/8" OD',
        "power_type": "Hydraulic",
        "bend_angle": 195,
        "country_of_origin": "USA",
        "warranty": "Lifetime (Workmanship & Material)",
        "materials": ["Mild Steel", "4130 Chromoly", "Aluminum", "Stainless Steel", "Titanium"],
        "category": "professional",
        "is_recommended": True,
        "features": [
            "Air/Hydraulic ram upgrade",
            "Pressure roller dies",
            "Thin-wall roller",
            "Backstop",
            "Rotation gauges",
            "Mandrel conversion available",
        ],
        "mandrel_bender": "Available",
        "wall_thickness_capacity": "0.156",
        "s_bend_capability": True,
    },
    {
        "id": 2,
        "name": "Baileigh RDB-050",
        "brand": "Baileigh",
        "model": "RDB-050",
        "rating": "8.0",
        "price_range": "$2,895 - $3,495",
        "price_min": "2895",
        "price_max": "3495",
        "max_capacity": '2.5" OD',
        "power_type": "Manual",
        "bend_angle": 200,
        "country_of_origin": "Taiwan",
        "materials": ["Mild Steel", "Chromoly", "Aluminum"],
        "category": "heavy-duty",
        "features": [
            "Three-speed settings",
            "Anti-spring-back mechanism",
            "Stand included",
            "Degree dial",
            "36-inch telescopic handle",
        ],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.095",
        "s_bend_capability": False,
    },
    {
        "id": 3,
        "name": "JD2 Model 32",
        "brand": "JD2",
        "model": "Model 32",
        "rating": "8.0",
        "price_range": "$1,545 - $1,895",
        "price_min": "1545",
        "price_max": "1895",
        "max_capacity": '2" OD',
        "power_type": "Manual",
        "bend_angle": 180,
        "country_of_origin": "USA",
        "materials": ["Mild Steel", "Chromoly", "Aluminum"],
        "category": "budget",
        "features": [
            "36-inch telescopic handle",
            "Degree indicator wheel",
            "CNC machined surfaces",
            "25-year proven design",
        ],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.120",
        "s_bend_capability": False,
    },
    {
        "id": 4,
        "name": "JD2 Model 32 Hydraulic",
        "brand": "JD2",
        "model": "Model 32-H",
        "rating": "8.5",
        "price_range": "$2,045 - $2,395",
        "price_min": "2045",
        "price_max": "2395",
        "max_capacity": '2" OD',
        "power_type": "Hydraulic",
        "bend_angle": 180,
        "country_of_origin": "USA",
        "materials": ["Mild Steel", "Chromoly", "Aluminum"],
        "category": "professional",
        "features": [
            "Double-acting hydraulic ram",
            "Electric pump with controls",
            "Degree markings",
            "Heavy-duty stand",
            "Quick-change tooling",
        ],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.120",
        "s_bend_capability": False,
    },
    {
        "id": 5,
        "name": "Woodward Fab WFB2",
        "brand": "Woodward Fab",
        "model": "WFB2",
        "rating": "6.5",
        "price_range": "$839 - $1,195",
        "price_min": "839",
        "price_max": "1195",
        "max_capacity": '2" OD',
        "power_type": "Manual",
        "bend_angle": 180,
        "country_of_origin": "China",
        "materials": ["Mild Steel", "Aluminum"],
        "category": "budget",
        "features": [
            "29-inch handle",
            "Engraved degree dial",
            "CNC machined components",
            "Compact design",
        ],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.120",
        "s_bend_capability": False,
    },
    {
        "id": 6,
        "name": "JMR TBM-250R RaceLine",
        "brand": "JMR Manufacturing",
        "model": "TBM-250R",
        "rating": "8.5",
        "price_range": "$780 - $950",
        "price_min": "780",
        "price_max": "950",
        "max_capacity": '2" OD',
        "power_type": "Manual",
        "bend_angle": 180,
        "country_of_origin": "USA",
        "materials": ["Mild Steel", "Chromoly", "Aluminum", "Stainless Steel"],
        "category": "professional",
        "features": [
            "3-speed operation",
            "Degree ring with pointer",
            "Heat-treated pins",
            "Hydraulic upgrade path",
        ],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.120",
        "s_bend_capability": False,
    },
    {
        "id": 7,
        "name": "JMR TBM-250 RaceLine",
        "brand": "JMR Manufacturing",
        "model": "TBM-250U RaceLine",
        "rating": "9.0",
        "price_range": "$1,000 - $1,250",
        "price_min": "1000",
        "price_max": "1250",
        "max_capacity": '2" OD',
        "power_type": "Manual",
        "bend_angle": 180,
        "country_of_origin": "USA",
        "materials": ["Mild Steel", "Chromoly", "Aluminum", "Stainless Steel"],
        "category": "professional",
        "features": [
            "5-speed operation",
            "Bronze bushings",
            "Powder-coated finish",
            "Premium construction",
        ],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.120",
        "s_bend_capability": False,
    },
    {
        "id": 8,
        "name": "Pro-Tools 105HD Heavy Duty",
        "brand": "Pro-Tools",
        "model": "105HD",
        "rating": "8.0",
        "price_range": "$1,264 - $1,609",
        "price_min": "1264",
        "price_max": "1609",
        "max_capacity": '2" OD',
        "power_type": "Manual",
        "bend_angle": 180,
        "country_of_origin": "USA",
        "materials": ["Mild Steel", "Chromoly", "Aluminum"],
        "category": "professional",
        "features": ['5/8" thick frame arms', "Steel bushings", "Degree plate", "USA manufactured"],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.120",
        "s_bend_capability": False,
    },
    {
        "id": 9,
        "name": "Pro-Tools BRUTE Hydraulic",
        "brand": "Pro-Tools",
        "model": "BRUTE",
        "rating": "9.5",
        "price_range": "$4,500 - $6,500",
        "price_min": "4500",
        "price_max": "6500",
        "max_capacity": '2.5" OD',
        "power_type": "Hydraulic",
        "bend_angle": 180,
        "country_of_origin": "USA",
        "materials": ["Mild Steel", "Chromoly", "Aluminum", "Stainless Steel"],
        "category": "professional",
        "features": [
            "15-ton hydraulic cylinder",
            '1" thick frame',
            "CNC machined degree ring",
            '2.5" capacity',
        ],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.120",
        "s_bend_capability": False,
    },
    {
        "id": 10,
        "name": "Mittler Bros Model 2500",
        "brand": "Mittler Bros",
        "model": "2500-HD",
        "rating": "8.5",
        "price_range": "$3,200 - $4,200",
        "price_min": "3200",
        "price_max": "4200",
        "max_capacity": '2" OD',
        "power_type": "Hydraulic",
        "bend_angle": 180,
        "country_of_origin": "USA",
        "materials": ["Mild Steel", "Chromoly", "Aluminum"],
        "category": "professional",
        "features": [
            "25-ton hydraulic ram",
            "180° bending",
            "Portable stand option",
            "Heavy-duty design",
        ],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.120",
        "s_bend_capability": False,
    },
    {
        "id": 11,
        "name": "Hossfeld Standard Model No. 2",
        "brand": "Hossfeld",
        "model": "Standard No. 2",
        "rating": "7.5",
        "price_range": "$1,800 - $2,500",
        "price_min": "1800",
        "price_max": "2500",
        "max_capacity": '2" OD',
        "power_type": "Manual",
        "bend_angle": 180,
        "country_of_origin": "USA",
        "materials": ["Mild Steel", "Chromoly", "Aluminum", "Flat Bar", "Angle Iron"],
        "category": "professional",
        "features": [
            "Universal material capability",
            "Extensive tooling catalog",
            "100+ year heritage",
            "Hydraulic upgrade option",
        ],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.120",
        "s_bend_capability": False,
    },
    {
        "id": 12,
        "name": "SWAG Off Road REV 2",
        "brand": "SWAG Off Road",
        "model": "REV 2",
        "rating": "9.6",
        "price_range": "$970 - $1,250",
        "price_min": "970",
        "price_max": "1250",
        "max_capacity": '2.0" OD',
        "power_type": "Manual/Hydraulic",
        "bend_angle": 180,
        "country_of_origin": "USA",
        "materials": ["Round Tube", "DOM Tubing", "Chromoly"],
        "category": "professional",
        "features": [
            "Precision machined components",
            "Oil-impregnated bronze bushings",
            "Machined aluminum degree wheel",
            '2" receiver hitch mount',
        ],
        "mandrel_bender": "No",
        "wall_thickness_capacity": "0.120",
        "s_bend_capability": False,
    },
]


def parse_catalog(records: list[dict[str, Any]]) -> list[Product]:
    """Validate raw product records.

    Raises:
        CatalogError: If any record is invalid
    """
    try:
        return _PRODUCT_LIST.validate_python(records)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog data: {e.error_count()} error(s)\n{e}") from e


def load_catalog(path: Union[str, Path]) -> list[Product]:
    """Load a catalog from a JSON file containing an array of products.

    Args:
        path: Path to the JSON export

    Returns:
        Validated products in file order

    Raises:
        CatalogError: If the file is missing, not JSON, or invalid
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog {path} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise CatalogError(f"Catalog {path} must contain a JSON array of products")

    products = parse_catalog(raw)
    logger.info(f"Loaded {len(products)} products from {path}")
    return products


def get_catalog(path: Optional[str] = None) -> list[Product]:
    """Return the configured catalog.

    Uses ``path`` if given, else ``settings.catalog_path``, else the bundled
    sample catalog.
    """
    path = path or get_settings().catalog_path
    if path:
        return load_catalog(path)
    return parse_catalog(SAMPLE_CATALOG)


def find_product(products: list[Product], product_id: int) -> Optional[Product]:
    """Find a product by id."""
    for product in products:
        if product.id == product_id:
            return product
    return None
