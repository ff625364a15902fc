"""Market rate cards and the quantity-to-input builder.

Rate cards are immutable values. Callers pick one (by name or directly) and
pass it into build_calculation_input; nothing here holds mutable state.
"""
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from expocost.config import get_settings
from expocost.schemas.calculation import (
    AreaInput,
    CalculationInput,
    ConstructionSpec,
    ContingencySpec,
    LogisticsSpec,
    MarketingSpec,
    SpaceSpec,
    StaffOpsSpec,
    TaxSpec,
    TravelSpec,
    UtilitiesSpec,
)
from expocost.schemas.rate_card import BoothQuantities, RateCard

INDIA_RATE_CARD = RateCard(
    name="india",
    currency="INR",
    space_rate_per_sqm=Decimal("3500"),
    construction_rate_per_sqm=Decimal("15000"),
    finish_factor=Decimal("1.0"),
    power_rate=Decimal("4500"),
    internet=Decimal("12000"),
    furniture=Decimal("18000"),
    rate_per_kg=Decimal("25"),
    rate_per_cbm=Decimal("800"),
    rate_per_km=Decimal("15"),
    airfare_per_person=Decimal("18000"),
    hotel_adr=Decimal("8000"),
    local_transport_per_day=Decimal("1000"),
    meals_per_person_per_day=Decimal("800"),
    promoter_rate_per_day=Decimal("2000"),
    uniforms=Decimal("8000"),
    ops_misc=Decimal("16000"),
    marketing_print=Decimal("15000"),
    marketing_giveaways=Decimal("10000"),
    marketing_digital=Decimal("20000"),
    gst_pct=Decimal("18"),
    tax_travel=False,
    contingency_pct=Decimal("5"),
    contingency_apply_on="post_tax",
    city_space_rates={
        "mumbai": Decimal("4200"),
        "delhi": Decimal("3900"),
        "bangalore": Decimal("3700"),
        "chennai": Decimal("3500"),
        "hyderabad": Decimal("3400"),
        "pune": Decimal("3200"),
        "ahmedabad": Decimal("3100"),
        "kolkata": Decimal("2900"),
        "jaipur": Decimal("2800"),
        "surat": Decimal("2700"),
        "indore": Decimal("2600"),
        "bhubaneswar": Decimal("2500"),
    },
    construction_tier_rates={
        "basic": Decimal("6000"),
        "modular": Decimal("8000"),
        "custom": Decimal("12000"),
        "premium": Decimal("15000"),
    },
    # Premiums only; discounted venues are priced with a lower city rate instead.
    venue_premiums_pct={
        "exhibition_hall": Decimal("0"),
        "convention_center": Decimal("15"),
        "hotel_venue": Decimal("25"),
    },
    flight_routes={
        "mumbai-delhi": Decimal("4800"),
        "mumbai-bangalore": Decimal("4200"),
        "mumbai-chennai": Decimal("4500"),
        "delhi-bangalore": Decimal("5400"),
        "delhi-chennai": Decimal("5600"),
        "bangalore-chennai": Decimal("3200"),
    },
    hotel_rates={
        "mumbai": {"budget": Decimal("4200"), "business": Decimal("9500"), "luxury": Decimal("18000")},
        "delhi": {"budget": Decimal("3900"), "business": Decimal("8800"), "luxury": Decimal("16500")},
        "bangalore": {"budget": Decimal("3700"), "business": Decimal("8200"), "luxury": Decimal("15500")},
        "chennai": {"budget": Decimal("3500"), "business": Decimal("8000"), "luxury": Decimal("15000")},
    },
)

RATE_CARDS: Mapping[str, RateCard] = MappingProxyType({INDIA_RATE_CARD.name: INDIA_RATE_CARD})


class UnknownRateCard(KeyError):
    """No rate card registered under the requested name."""


DEFAULT_RATE_CARD_ALIAS = "default"


def get_rate_card(name: str | None = None) -> RateCard:
    """Look up a card by name; None or "default" means the configured default card."""
    key = (name or "").strip().lower()
    if not key or key == DEFAULT_RATE_CARD_ALIAS:
        key = get_settings().default_rate_card.strip().lower()
    if key not in RATE_CARDS:
        raise UnknownRateCard(name)
    return RATE_CARDS[key]


def _lookup(table: Mapping[str, Decimal], key: str | None, default: Decimal) -> Decimal:
    """Case-insensitive table lookup; unknown or missing keys fall back to the default."""
    if not key or not key.strip():
        return default
    return table.get(key.strip().lower(), default)


def _route_airfare(card: RateCard, route: str | None) -> Decimal:
    """Airfare for "origin-destination", looked up in either direction."""
    if not route or "-" not in route:
        return card.airfare_per_person
    origin, _, destination = route.partition("-")
    forward = f"{origin.strip()}-{destination.strip()}"
    backward = f"{destination.strip()}-{origin.strip()}"
    return _lookup(card.flight_routes, forward, _lookup(card.flight_routes, backward, card.airfare_per_person))


def _hotel_adr(card: RateCard, city: str | None, hotel_class: str | None) -> Decimal:
    if not city or not city.strip():
        return card.hotel_adr
    classes = card.hotel_rates.get(city.strip().lower(), {})
    return _lookup(classes, hotel_class, card.hotel_adr)


def build_calculation_input(card: RateCard, quantities: BoothQuantities) -> CalculationInput:
    """Combine booth quantities with a market's rates into a calculation input."""
    return CalculationInput(
        area=AreaInput(value=quantities.area, unit=quantities.unit),
        space=SpaceSpec(
            rate_per_sqm=_lookup(card.city_space_rates, quantities.city, card.space_rate_per_sqm),
            location_premium_pct=_lookup(card.venue_premiums_pct, quantities.venue_type, Decimal(0)),
        ),
        construction=ConstructionSpec(
            rate_per_sqm=_lookup(
                card.construction_tier_rates,
                quantities.construction_tier,
                card.construction_rate_per_sqm,
            ),
            finish_factor=card.finish_factor,
        ),
        utilities=UtilitiesSpec(
            power_kw=quantities.power_kw,
            power_rate=card.power_rate,
            internet=quantities.internet if quantities.internet is not None else card.internet,
            furniture=quantities.furniture if quantities.furniture is not None else card.furniture,
        ),
        logistics=LogisticsSpec(
            weight_kg=quantities.weight_kg,
            rate_per_kg=card.rate_per_kg,
            cbm=quantities.cbm,
            rate_per_cbm=card.rate_per_cbm,
            route_km=quantities.route_km,
            rate_per_km=card.rate_per_km,
        ),
        travel=TravelSpec(
            team_count=quantities.team_count,
            nights=quantities.nights,
            airfare_per_person=_route_airfare(card, quantities.route),
            hotel_adr=_hotel_adr(card, quantities.city, quantities.hotel_class),
            local_transport_per_day=card.local_transport_per_day,
            meals_per_person_per_day=card.meals_per_person_per_day,
        ),
        staff_ops=StaffOpsSpec(
            promoters=quantities.promoters,
            promoter_days=quantities.promoter_days,
            promoter_rate_per_day=card.promoter_rate_per_day,
            uniforms=card.uniforms,
            ops_misc=card.ops_misc,
        ),
        marketing=MarketingSpec(
            print=card.marketing_print,
            giveaways=card.marketing_giveaways,
            digital=card.marketing_digital if quantities.digital else None,
            av=quantities.av,
            other=quantities.other_marketing,
        ),
        tax=TaxSpec(
            gst_pct=card.gst_pct,
            tax_space=card.tax_space,
            tax_construction=card.tax_construction,
            tax_utilities=card.tax_utilities,
            tax_logistics=card.tax_logistics,
            tax_travel=card.tax_travel,
            tax_staff_ops=card.tax_staff_ops,
            tax_marketing=card.tax_marketing,
        ),
        contingency=ContingencySpec(
            pct=card.contingency_pct,
            apply_on=card.contingency_apply_on,
        ),
    )
