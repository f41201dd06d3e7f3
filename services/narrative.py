# Narrative: human-readable copy for a city comparison
# Turns a ComparisonResult into the verdict, per-dimension sections,
# FAQs and page title/description. Templates only, no decisions beyond
# what compare() already made.

from typing import List
from config import SITE_BASE_URL
from models.schemas import LocationRecord, ComparisonResult, ComparisonSection, FAQItem
from services.comparison import parse_distance


def render_verdict(result: ComparisonResult, a: LocationRecord, b: LocationRecord) -> str:
    if result.overall_winner is not None:
        return f"{result.overall_winner.name} is the Clear Winner! 🏆"
    return f"It depends: {result.cheaper.name} for Budget, {result.closer.name} for Proximity"


def render_verdict_detail(result: ComparisonResult) -> str:
    closer, cheaper = result.closer, result.cheaper
    return (
        f"If you want to reach the temple quickly, choose {closer.name} "
        f"({closer.distance_from_kedarnath} away). "
        f"If you want to save money on hotels, {cheaper.name} is approx "
        f"{result.price_delta_percent}% cheaper."
    )


def _better_network(a: LocationRecord, b: LocationRecord) -> LocationRecord:
    # Towns nearer the plains sit on the main highway towers
    return a if parse_distance(a.distance_from_delhi) <= parse_distance(b.distance_from_delhi) else b


def generate_comparison_faqs(
    a: LocationRecord,
    b: LocationRecord,
    result: ComparisonResult
) -> List[FAQItem]:
    """
    Three fixed questions, in fixed order:
      1. phone network   -> city nearer to Delhi
      2. elderly parents -> closer city
      3. food options    -> closer city as the small halt
    """
    closer     = result.closer
    small_halt = "Gaurikund" if closer.name == "Sonprayag" else closer.name

    return [
        FAQItem(
            question="Which is better for reliable phone network?",
            answer=(
                f"{_better_network(a, b).name} generally has better connectivity. "
                "Major towns like Guptkashi/Phata have stable Jio/Airtel 4G. "
                "Higher up near Sonprayag, it can be patchy."
            )
        ),
        FAQItem(
            question="I am traveling with parents (60+). Where should we stay?",
            answer=(
                f"Choose {closer.name}. The road travel from {result.farther.name} to Sonprayag "
                "adds fatigue before the trek begins. Minimizing morning travel is crucial "
                "for elderly pilgrims."
            )
        ),
        FAQItem(
            question="Which has better food options?",
            answer=(
                "Larger towns like Guptkashi/Sitapur have proper restaurants. "
                f"Smaller halts like {small_halt} mostly have basic dhabas."
            )
        ),
    ]


def build_sections(
    result: ComparisonResult,
    a: LocationRecord,
    b: LocationRecord
) -> List[ComparisonSection]:
    """Proximity, budget and vibe breakdowns, in that order."""
    return [
        ComparisonSection(
            title="📍 Proximity to Kedarnath",
            metric="closer",
            winner=result.closer.slug,
            loser=result.farther.slug,
            diff=f"{result.distance_delta_km} km",
            description=(
                "Being closer means you can start your trek earlier. "
                f"{result.closer.name} saves you travel time in the morning."
            )
        ),
        ComparisonSection(
            title="💰 Budget & Costs",
            metric="cheaper",
            winner=result.cheaper.slug,
            loser=result.costlier.slug,
            diff=f"{result.price_delta_percent}%",
            description=(
                f"{result.cheaper.name} offers better value for money, with average "
                f"hotel rates around {result.cheaper.avg_hotel_price}."
            )
        ),
        ComparisonSection(
            title="✨ Vibe & Atmosphere",
            vibes={a.name: a.stay_vibe, b.name: b.stay_vibe},
            description=(
                "Different travelers seek different experiences. "
                "Choose based on what you prioritize."
            )
        ),
    ]


def page_title(a: LocationRecord, b: LocationRecord) -> str:
    return f"{a.name} vs {b.name}: Which is Better for Kedarnath Yatra?"


def page_description(result: ComparisonResult, a: LocationRecord, b: LocationRecord) -> str:
    return (
        f"Comparing {a.name} and {b.name} for your Kedarnath trip. "
        f"{result.closer.name} is closer to the temple, while "
        f"{result.cheaper.name} offers better rates."
    )


def canonical_url(path: str) -> str:
    return f"{SITE_BASE_URL}{path}"
