from fastapi import APIRouter, HTTPException
from models.schemas import ComparisonPage, ComparisonDirectory
from services.compare_page import build_comparison_page, build_comparison_directory, ComparisonNotFound

router = APIRouter(tags=["compare"])


@router.get("/compare-cities", response_model=ComparisonDirectory)
def compare_directory():
    """List every city pair that has a comparison page."""
    return build_comparison_directory()


@router.get("/compare/{slug}", response_model=ComparisonPage)
def compare_cities(slug: str):
    """
    Compare two route cities from a "<city1>-vs-<city2>" slug.
    The "-stay-for-kedarnath" SEO suffix is optional.
    """
    try:
        return build_comparison_page(slug)
    except ComparisonNotFound:
        raise HTTPException(status_code=404, detail="Comparison Not Found")
