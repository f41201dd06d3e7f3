from fastapi import APIRouter, HTTPException
from models.schemas import LocationRecord
from services.city_service import list_cities, get_city

router = APIRouter(prefix="/cities", tags=["cities"])


@router.get("/")
def list_route_cities():
    """Return all route cities with the fields used by comparison cards."""
    return [
        {
            "slug":                    c.slug,
            "name":                    c.name,
            "type":                    c.type,
            "distance_from_kedarnath": c.distance_from_kedarnath,
            "avg_hotel_price":         c.avg_hotel_price,
            "stay_vibe":               c.stay_vibe,
            "image":                   c.images[0] if c.images else None
        }
        for c in list_cities()
    ]


@router.get("/{slug}", response_model=LocationRecord)
def get_route_city(slug: str):
    """Get the full record for a single city."""
    city = get_city(slug)
    if city is None:
        raise HTTPException(status_code=404, detail=f"City '{slug}' not found")
    return city
