"""Parsing of numbers embedded in catalog display strings.

Catalog records carry most numeric data as display text: ``"$1,895 - $2,695"``,
``'2-3/8" OD'``, ``"0.156"``. Every conversion from such text to a number
lives here. All parsers are total: unparseable input yields ``None`` or a
documented default, never an exception.
"""

import re
from typing import Optional

# Leading decimal number, the way a lenient float parser reads a prefix
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")

# First dollar amount in a display string, e.g. "$1,895" in "$1,895 - $2,695"
_DOLLAR_AMOUNT = re.compile(r"\$([0-9,]+)")

# Leftmost quantity: mixed fraction, bare fraction, then decimal
_DIAMETER = re.compile(
    r"(?P<whole>\d+)[\s-]+(?P<num>\d+)/(?P<den>\d+)"
    r"|(?P<fnum>\d+)/(?P<fden>\d+)"
    r"|(?P<decimal>\d*\.?\d+)"
)

# Wall capacity assumed by the finder when a product publishes none
DEFAULT_FINDER_WALL_THICKNESS = 0.120


def parse_leading_number(text: Optional[str]) -> Optional[float]:
    """Parse the numeric prefix of a string.

    ``"0.156"`` -> 0.156, ``"1895 "`` -> 1895.0, ``"0.120 in"`` -> 0.12.

    Args:
        text: String to parse (may be None)

    Returns:
        The parsed number, or None if the string does not start with one
    """
    if not text:
        return None
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return None
    return float(match.group(1))


def parse_wall_thickness(text: Optional[str]) -> Optional[float]:
    """Parse a wall thickness capacity such as ``"0.156"`` (inches)."""
    return parse_leading_number(text)


def parse_listing_price(price_range: Optional[str]) -> float:
    """Parse the first dollar amount of a display price.

    Tolerates thousands separators and the leading currency symbol.

    Args:
        price_range: Display price, e.g. ``"$1,895 - $2,695"``

    Returns:
        First amount in dollars (1895.0), or 0.0 when none can be found
    """
    if not price_range:
        return 0.0
    match = _DOLLAR_AMOUNT.search(price_range)
    if match is None:
        return 0.0
    digits = match.group(1).replace(",", "")
    if not digits:
        return 0.0
    return float(digits)


def parse_range_start(price_range: Optional[str]) -> Optional[float]:
    """Parse the lower bound of a price range string.

    Currency symbols and separators are dropped, the string is split on the
    first ``-`` and the leading number of the first part is returned.
    """
    if not price_range:
        return None
    cleaned = price_range.replace("$", "").replace(",", "")
    return parse_leading_number(cleaned.split("-")[0])


def parse_starting_price(
    price_range: Optional[str], price_min: Optional[str] = None
) -> Optional[float]:
    """Resolve a product's starting price.

    The structured ``price_min`` wins when it parses; otherwise the lower
    bound of the display range is used.

    Args:
        price_range: Display price, e.g. ``"$1,895 - $2,695"``
        price_min: Structured starting price as a decimal string

    Returns:
        Starting price in dollars, or None when neither form parses
    """
    structured = parse_leading_number(price_min)
    if structured is not None:
        return structured
    return parse_range_start(price_range)


def parse_diameter(text: Optional[str]) -> float:
    """Parse a tube diameter (inches) from a capacity string.

    Handles decimals (``'2.5" OD'``), mixed fractions (``'2-3/8" OD'``,
    ``'1 3/4"'``) and bare fractions (``'3/4"'``). The leftmost quantity
    in the string is used.

    Returns:
        Diameter in inches, 0.0 when no quantity is present
    """
    if not text:
        return 0.0
    match = _DIAMETER.search(text)
    if match is None:
        return 0.0

    if match.group("whole") is not None:
        den = int(match.group("den"))
        whole = float(match.group("whole"))
        if den == 0:
            return whole
        return whole + int(match.group("num")) / den

    if match.group("fnum") is not None:
        den = int(match.group("fden"))
        if den == 0:
            return 0.0
        return int(match.group("fnum")) / den

    return float(match.group("decimal"))


def format_price(amount: float) -> str:
    """Format a dollar amount for display: ``$1,895`` or ``$1,895.50``."""
    if float(amount).is_integer():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_inches(value: float) -> str:
    """Format a diameter without trailing zeros: 2.0 -> ``2``, 2.375 -> ``2.375``."""
    return f"{value:g}"
