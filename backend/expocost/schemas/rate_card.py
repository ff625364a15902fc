"""Rate card and booth quantity schemas."""
from decimal import Decimal

from pydantic import BaseModel, Field


class RateCard(BaseModel):
    """Default unit rates for one market. Passed explicitly into every estimate."""

    name: str
    currency: str = Field(..., min_length=3, max_length=3)

    space_rate_per_sqm: Decimal
    construction_rate_per_sqm: Decimal
    finish_factor: Decimal = Decimal(1)
    power_rate: Decimal
    internet: Decimal = Decimal(0)
    furniture: Decimal = Decimal(0)
    rate_per_kg: Decimal
    rate_per_cbm: Decimal = Decimal(0)
    rate_per_km: Decimal = Decimal(0)
    airfare_per_person: Decimal
    hotel_adr: Decimal
    local_transport_per_day: Decimal
    meals_per_person_per_day: Decimal
    promoter_rate_per_day: Decimal
    uniforms: Decimal = Decimal(0)
    ops_misc: Decimal = Decimal(0)
    marketing_print: Decimal = Decimal(0)
    marketing_giveaways: Decimal = Decimal(0)
    marketing_digital: Decimal = Decimal(0)

    gst_pct: Decimal
    tax_space: bool = True
    tax_construction: bool = True
    tax_utilities: bool = True
    tax_logistics: bool = True
    tax_travel: bool = False
    tax_staff_ops: bool = True
    tax_marketing: bool = True

    contingency_pct: Decimal
    contingency_apply_on: str = "post_tax"

    city_space_rates: dict[str, Decimal] = {}
    construction_tier_rates: dict[str, Decimal] = {}
    venue_premiums_pct: dict[str, Decimal] = {}
    # "origin-destination" -> airfare per person, either direction
    flight_routes: dict[str, Decimal] = {}
    # city -> hotel class (budget/business/luxury) -> ADR
    hotel_rates: dict[str, dict[str, Decimal]] = {}

    class Config:
        frozen = True


class BoothQuantities(BaseModel):
    """Quantities collected from a front end; rates come from a rate card."""

    area: Decimal
    unit: str = "sqm"
    city: str | None = None
    construction_tier: str | None = None
    venue_type: str | None = None
    power_kw: Decimal | None = None
    internet: Decimal | None = None
    furniture: Decimal | None = None
    weight_kg: Decimal | None = None
    cbm: Decimal | None = None
    route_km: Decimal | None = None
    team_count: int | None = None
    nights: int | None = None
    route: str | None = None
    hotel_class: str | None = None
    promoters: int | None = None
    promoter_days: int | None = None
    av: Decimal | None = None
    digital: bool = False
    other_marketing: Decimal | None = None

    class Config:
        frozen = True
