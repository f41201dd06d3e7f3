# Compare Page: main orchestrator
# Coordinates: slug parsing → city lookup → comparison → narrative copy

import logging
from services.slug_service import parse_comparison_slug, generate_comparison_links, InvalidComparisonSlug
from services.city_service import get_city, list_cities
from services.comparison import compare
from services.narrative import (
    render_verdict, render_verdict_detail, generate_comparison_faqs,
    build_sections, page_title, page_description, canonical_url
)
from models.schemas import ComparisonPage, ComparisonDirectory, CityColumn

logger = logging.getLogger(__name__)

DIRECTORY_TITLE       = "Compare Kedarnath Route Cities | Distance & Cost Analysis"
DIRECTORY_DESCRIPTION = (
    "Compare distances, hotel rates, and vibes of all major cities on the "
    "Kedarnath Yatra route. Find the best stopover for your pilgrimage."
)


class ComparisonNotFound(LookupError):
    """Slug is malformed or one of its cities does not exist."""


def build_comparison_page(slug: str) -> ComparisonPage:
    """
    Full pipeline:
      1. Parse "<city1>-vs-<city2>" (optional SEO suffix)
      2. Look up both cities; missing → ComparisonNotFound
      3. compare() → winners and deltas
      4. Verdict, sections, FAQs and page meta
    """
    try:
        slug_a, slug_b = parse_comparison_slug(slug)
    except InvalidComparisonSlug:
        logger.info("Malformed comparison slug %r", slug)
        raise ComparisonNotFound(slug)

    a = get_city(slug_a)
    b = get_city(slug_b)
    if a is None or b is None:
        logger.info("Comparison %r references unknown city", slug)
        raise ComparisonNotFound(slug)

    result = compare(a, b)

    return ComparisonPage(
        slug=slug,
        title=page_title(a, b),
        description=page_description(result, a, b),
        canonical_url=canonical_url(f"/compare/{slug}"),
        heading=f"{a.name} vs {b.name}",
        verdict=render_verdict(result, a, b),
        verdict_detail=render_verdict_detail(result),
        result=result,
        columns=[
            CityColumn(city=c, is_winner=c.slug in (result.closer.slug, result.cheaper.slug))
            for c in (a, b)
        ],
        sections=build_sections(result, a, b),
        faqs=generate_comparison_faqs(a, b, result),
        hotel_links=[f"/{a.slug}/hotels", f"/{b.slug}/hotels"]
    )


def build_comparison_directory() -> ComparisonDirectory:
    """Every unique city pair as a link card."""
    return ComparisonDirectory(
        title=DIRECTORY_TITLE,
        description=DIRECTORY_DESCRIPTION,
        canonical_url=canonical_url("/compare-cities"),
        comparisons=generate_comparison_links(list_cities())
    )
