# Comparison slugs: "<city1>-vs-<city2>[-stay-for-kedarnath]"
# Parsing for incoming /compare/{slug} requests and building for the
# comparison directory.

from typing import List, Tuple
from config import COMPARE_SEPARATOR, COMPARE_SLUG_SUFFIX
from models.schemas import LocationRecord, ComparisonLink


class InvalidComparisonSlug(ValueError):
    """Path segment is not of the form <city1>-vs-<city2>."""


def parse_comparison_slug(slug: str) -> Tuple[str, str]:
    """
    Split a comparison path segment into its two city slugs.
    Accepts both the plain and the SEO-suffixed form:
      guptkashi-vs-sonprayag
      guptkashi-vs-sonprayag-stay-for-kedarnath
    """
    clean = slug[:-len(COMPARE_SLUG_SUFFIX)] if slug.endswith(COMPARE_SLUG_SUFFIX) else slug
    parts = clean.split(COMPARE_SEPARATOR)

    if len(parts) != 2 or not all(parts):
        raise InvalidComparisonSlug(f"Invalid comparison slug '{slug}'")
    return parts[0], parts[1]


def build_comparison_slug(slug_a: str, slug_b: str, seo: bool = True) -> str:
    slug = f"{slug_a}{COMPARE_SEPARATOR}{slug_b}"
    return slug + COMPARE_SLUG_SUFFIX if seo else slug


def generate_comparison_links(cities: List[LocationRecord]) -> List[ComparisonLink]:
    """One link per unordered city pair, in dataset order."""
    links = []
    for i, a in enumerate(cities):
        for b in cities[i + 1:]:
            links.append(ComparisonLink(
                url=f"/compare/{build_comparison_slug(a.slug, b.slug)}",
                title=f"{a.name} vs {b.name}",
                vibes=f"{a.stay_vibe} vs {b.stay_vibe}"
            ))
    return links
