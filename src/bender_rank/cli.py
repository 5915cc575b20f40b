"""Command-line interface for the scoring and finder engine."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from bender_rank.catalog import CatalogError, find_product, get_catalog
from bender_rank.config import get_settings
from bender_rank.finder import (
    BasicFinderCriteria,
    FinderCriteria,
    UnknownMatcherError,
    get_matcher,
)
from bender_rank.scoring import (
    BenderType,
    ListingFilters,
    PriceBucket,
    Product,
    filter_and_rank,
    rank_scored,
    score_product_safe,
    scoring_methodology,
)

CRITERIA_MODELS = {
    "basic": BasicFinderCriteria,
    "enhanced": FinderCriteria,
}


def create_example_product() -> Product:
    """Create an example product record."""
    return Product(
        id=100,
        name="Example 2in Manual Bender",
        brand="JMR Manufacturing",
        model="TBM-250R",
        rating="8.5",
        price_range="$780 - $950",
        price_min="780",
        max_capacity='2" OD',
        power_type="Manual",
        bend_angle=200,
        country_of_origin="USA",
        category="professional",
        materials=["Mild Steel", "Chromoly"],
        features=["3-speed operation", "Hydraulic upgrade path"],
        mandrel_bender="Available",
        wall_thickness_capacity="0.120",
        s_bend_capability=True,
    )


def score_command(args: argparse.Namespace) -> None:
    """Score a product from JSON, by catalog id, or use the example."""
    if args.json:
        product = Product.model_validate(json.loads(args.json))
    elif args.id is not None:
        product = find_product(get_catalog(args.catalog), args.id)
        if product is None:
            raise CatalogError(f"No product with id {args.id}")
    else:
        product = create_example_product()
        print("Using example product (use --json or --id to provide your own)\n")

    breakdown = score_product_safe(product)

    print(f"Product: {product.name}")
    print(f"{'=' * 60}")
    for entry in breakdown.entries:
        print(f"  {entry.criterion:32}: {entry.points:>3}/{entry.max_points:<3} {entry.reasoning}")
    print(f"{'=' * 60}")
    print(f"Total: {breakdown.total}/{breakdown.max_total}")
    if breakdown.degraded:
        print("(estimated from overall rating)")


def rank_command(args: argparse.Namespace) -> None:
    """Print the catalog ranked by score."""
    ranked = rank_scored(get_catalog(args.catalog))
    for position, item in enumerate(ranked[: args.limit], start=1):
        product = item.product
        print(f"{position:>3}. {item.total_score:>3}  {product.name} ({product.price_range})")


def filter_command(args: argparse.Namespace) -> None:
    """Apply listing filters and print the ranked survivors."""
    filters = ListingFilters(
        max_price=args.max_price,
        usa_only=args.usa_only,
        pipe_capable=args.pipe,
        square_tube_capable=args.square,
        feature_search=args.feature,
        bender_type=BenderType(args.type),
        category=args.category,
        price_bucket=PriceBucket(args.bucket),
        brand=args.brand,
    )
    results = filter_and_rank(get_catalog(args.catalog), filters)
    if not results:
        print("No products match the current filters.")
        return
    for product in results:
        print(f"  {product.name:34} {product.price_range:20} {product.country_of_origin}")


def find_command(args: argparse.Namespace) -> None:
    """Run a finder strategy against the catalog."""
    matcher = get_matcher(args.strategy)
    criteria_model = CRITERIA_MODELS[args.strategy]
    criteria = criteria_model.model_validate(json.loads(args.json))

    results = matcher.match(get_catalog(args.catalog), criteria, args.limit)
    if not results:
        print("No matching tube benders. Try relaxing your requirements.")
        return

    for position, result in enumerate(results, start=1):
        print(f"{position}. {result.product.name} (match score {result.score})")
        if result.matched_criteria:
            print(f"   Matched: {', '.join(result.matched_criteria)}")
        for reason in result.reasons:
            print(f"   - {reason}")


def main() -> int:
    """Main CLI entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(
        prog="bender-rank",
        description="Tube bender scoring, ranking and finder engine",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Path to a JSON catalog export (default: settings / sample catalog)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Score command
    score_parser = subparsers.add_parser("score", help="Score a product")
    score_parser.add_argument("--json", type=str, help="Product data as JSON string")
    score_parser.add_argument("--id", type=int, help="Catalog product id")

    # Rank command
    rank_parser = subparsers.add_parser("rank", help="Rank the catalog by score")
    rank_parser.add_argument("--limit", type=int, default=None, help="Show only the top N")

    # Filter command
    filter_parser = subparsers.add_parser("filter", help="Filter and rank the catalog")
    filter_parser.add_argument("--max-price", type=float, help="Listing price ceiling")
    filter_parser.add_argument("--usa-only", action="store_true", help="USA-made only")
    filter_parser.add_argument("--pipe", action="store_true", help="Pipe / round tube capable")
    filter_parser.add_argument("--square", action="store_true", help="Square tube capable")
    filter_parser.add_argument("--feature", type=str, help="Feature substring")
    filter_parser.add_argument(
        "--type", choices=[t.value for t in BenderType], default=BenderType.ALL.value
    )
    filter_parser.add_argument("--category", type=str, help="Exact category")
    filter_parser.add_argument(
        "--bucket", choices=[b.value for b in PriceBucket], default=PriceBucket.ALL.value
    )
    filter_parser.add_argument("--brand", type=str, help="Exact brand")

    # Find command
    find_parser = subparsers.add_parser("find", help="Run the finder")
    find_parser.add_argument(
        "--strategy",
        choices=sorted(CRITERIA_MODELS),
        default="enhanced",
        help="Finder strategy (default: enhanced)",
    )
    find_parser.add_argument(
        "--json",
        type=str,
        default="{}",
        help='Finder criteria as JSON, e.g. \'{"budget": 2000, "max_diameter": 2}\'',
    )
    find_parser.add_argument("--limit", type=int, default=None, help="Shortlist length")

    # Methodology command
    subparsers.add_parser("methodology", help="Print the scoring methodology")

    # Example command
    example_parser = subparsers.add_parser("example", help="Show example product JSON")
    example_parser.add_argument("--pretty", action="store_true", help="Pretty print JSON")

    args = parser.parse_args()

    try:
        if args.command == "score":
            score_command(args)
        elif args.command == "rank":
            rank_command(args)
        elif args.command == "filter":
            filter_command(args)
        elif args.command == "find":
            find_command(args)
        elif args.command == "methodology":
            print(scoring_methodology())
        elif args.command == "example":
            data = create_example_product().model_dump(by_alias=True)
            print(json.dumps(data, indent=2 if args.pretty else None))
        else:
            parser.print_help()
            return 1
    except (CatalogError, UnknownMatcherError, ValidationError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
