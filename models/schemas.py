from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Literal, Dict


class TaxiRates(BaseModel):
    model_config = ConfigDict(frozen=True)

    drop_sonprayag_sedan: Optional[int] = None
    drop_sonprayag_suv:   Optional[int] = None


class Connectivity(BaseModel):
    model_config = ConfigDict(frozen=True)

    nearest_airport: str = ""
    nearest_railway: str = ""


class LocationRecord(BaseModel):
    """A stop-over town on the Kedarnath route, as stored in the cities dataset."""
    model_config = ConfigDict(frozen=True)

    slug:                    str
    name:                    str
    type:                    str = ""
    state:                   str = "Uttarakhand"
    distance_from_delhi:     str = ""
    distance_from_kedarnath: str = ""
    elevation:               str = ""
    taxi_rates:              TaxiRates = TaxiRates()
    stay_vibe:               str = ""
    avg_hotel_price:         str = ""
    images:                  List[str] = []
    description:             str = ""
    connectivity:            Connectivity = Connectivity()


class ComparisonResult(BaseModel):
    closer:              LocationRecord
    farther:             LocationRecord
    cheaper:             LocationRecord
    costlier:            LocationRecord
    distance_a_km:       int
    distance_b_km:       int
    price_a:             float
    price_b:             float
    distance_delta_km:   int
    price_delta_percent: int
    overall_winner:      Optional[LocationRecord] = None


class FAQItem(BaseModel):
    question: str
    answer:   str


class ComparisonSection(BaseModel):
    title:       str
    metric:      Optional[Literal["closer", "cheaper"]] = None
    winner:      Optional[str] = None
    loser:       Optional[str] = None
    diff:        Optional[str] = None
    description: str
    vibes:       Optional[Dict[str, str]] = None


class CityColumn(BaseModel):
    city:      LocationRecord
    is_winner: bool


class ComparisonPage(BaseModel):
    slug:           str
    title:          str
    description:    str
    canonical_url:  str
    heading:        str
    verdict:        str
    verdict_detail: str
    result:         ComparisonResult
    columns:        List[CityColumn]
    sections:       List[ComparisonSection]
    faqs:           List[FAQItem]
    hotel_links:    List[str]


class ComparisonLink(BaseModel):
    url:   str
    title: str
    vibes: str


class ComparisonDirectory(BaseModel):
    title:         str
    description:   str
    canonical_url: str
    comparisons:   List[ComparisonLink]
