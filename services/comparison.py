# Comparison Engine: closer vs cheaper between two route cities
# Parses the free-text distance and hotel-price fields of two LocationRecords
# and decides which city wins on each dimension. Pure and total: malformed
# fields fall back to configured defaults instead of raising.

import re
import math
from typing import Optional
from config import DISTANCE_FALLBACK_KM, PRICE_FALLBACK_INR
from models.schemas import LocationRecord, ComparisonResult

_DIGITS       = re.compile(r"[0-9]+")
_PRICE_NUMBER = re.compile(r"[0-9][0-9,]*")

# Longer runs are not distances, and past 4300 digits int() refuses them
_MAX_DISTANCE_DIGITS = 9


def parse_distance(raw: Optional[str], fallback: int = DISTANCE_FALLBACK_KM) -> int:
    """First run of ASCII digits in `raw`, read as km. `fallback` if there is none."""
    match = _DIGITS.search(raw or "")
    if not match or len(match.group()) > _MAX_DISTANCE_DIGITS:
        return fallback
    return int(match.group())


def parse_average_price(raw: Optional[str], fallback: float = PRICE_FALLBACK_INR) -> float:
    """
    Average nightly rate from a price string.
      "₹3,000"           -> 3000
      "₹1,500 - ₹6,000"  -> 3750 (range midpoint)
    More than two numbers: the first one is used.
    Numbers too large for a float count as unparsable.
    """
    numbers = [
        float(m.replace(",", ""))
        for m in _PRICE_NUMBER.findall(raw or "")
    ]
    if not numbers or not all(math.isfinite(n) for n in numbers):
        return float(fallback)
    if len(numbers) == 2:
        return numbers[0] / 2 + numbers[1] / 2
    return numbers[0]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def price_delta_percent(price_a: float, price_b: float) -> int:
    """Relative price gap as a percentage of the dearer city, 0 when both are free."""
    top = max(price_a, price_b)
    if top <= 0 or not math.isfinite(top):
        return 0
    return _round_half_up(abs(price_a - price_b) / top * 100)


def compare(a: LocationRecord, b: LocationRecord) -> ComparisonResult:
    """
    Compare two cities on distance to Kedarnath and average hotel price.
    Ties go to `a`. `overall_winner` is set only when one city is both
    closer and cheaper.
    """
    dist_a  = parse_distance(a.distance_from_kedarnath)
    dist_b  = parse_distance(b.distance_from_kedarnath)
    price_a = parse_average_price(a.avg_hotel_price)
    price_b = parse_average_price(b.avg_hotel_price)

    closer, farther   = (a, b) if dist_a <= dist_b else (b, a)
    cheaper, costlier = (a, b) if price_a <= price_b else (b, a)

    return ComparisonResult(
        closer=closer,
        farther=farther,
        cheaper=cheaper,
        costlier=costlier,
        distance_a_km=dist_a,
        distance_b_km=dist_b,
        price_a=price_a,
        price_b=price_b,
        distance_delta_km=abs(dist_a - dist_b),
        price_delta_percent=price_delta_percent(price_a, price_b),
        overall_winner=closer if closer.slug == cheaper.slug else None
    )
