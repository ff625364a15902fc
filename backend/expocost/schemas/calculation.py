"""Calculation input and result schemas."""
from decimal import Decimal
from enum import Enum as PyEnum

from pydantic import BaseModel


class CostCategory(str, PyEnum):
    SPACE = "space"
    CONSTRUCTION = "construction"
    UTILITIES = "utilities"
    LOGISTICS = "logistics"
    TRAVEL = "travel"
    STAFF_OPS = "staff_ops"
    MARKETING = "marketing"


class CostBasis(str, PyEnum):
    FLAT = "flat"
    RATE = "rate"


class ContingencyBase(str, PyEnum):
    PRE_TAX = "pre_tax"
    POST_TAX = "post_tax"


class _Spec(BaseModel):
    class Config:
        frozen = True


class _FlatOrRateSpec(_Spec):
    flat: Decimal | None = None

    @property
    def basis(self) -> CostBasis:
        """A supplied flat amount, even zero, wins over any rate."""
        return CostBasis.FLAT if self.flat is not None else CostBasis.RATE


class AreaInput(_Spec):
    value: Decimal
    unit: str = "sqm"


class SpaceSpec(_FlatOrRateSpec):
    rate_per_sqm: Decimal | None = None
    location_premium_pct: Decimal | None = None


class ConstructionSpec(_FlatOrRateSpec):
    rate_per_sqm: Decimal | None = None
    finish_factor: Decimal | None = None


class UtilitiesSpec(_Spec):
    power_kw: Decimal | None = None
    power_rate: Decimal | None = None
    internet: Decimal | None = None
    water: Decimal | None = None
    furniture: Decimal | None = None
    other: Decimal | None = None


class LogisticsSpec(_FlatOrRateSpec):
    weight_kg: Decimal | None = None
    rate_per_kg: Decimal | None = None
    cbm: Decimal | None = None
    rate_per_cbm: Decimal | None = None
    route_km: Decimal | None = None
    rate_per_km: Decimal | None = None


class TravelSpec(_Spec):
    team_count: int | None = None
    nights: int | None = None
    airfare_per_person: Decimal | None = None
    hotel_adr: Decimal | None = None
    local_transport_per_day: Decimal | None = None
    meals_per_person_per_day: Decimal | None = None


class StaffOpsSpec(_Spec):
    promoters: int | None = None
    promoter_days: int | None = None
    promoter_rate_per_day: Decimal | None = None
    uniforms: Decimal | None = None
    ops_misc: Decimal | None = None


class MarketingSpec(_Spec):
    print: Decimal | None = None
    giveaways: Decimal | None = None
    digital: Decimal | None = None
    av: Decimal | None = None
    other: Decimal | None = None


class TaxSpec(_Spec):
    gst_pct: Decimal | None = None
    tax_space: bool = False
    tax_construction: bool = False
    tax_utilities: bool = False
    tax_logistics: bool = False
    tax_travel: bool = False
    tax_staff_ops: bool = False
    tax_marketing: bool = False

    def is_taxed(self, category: CostCategory) -> bool:
        return getattr(self, f"tax_{category.value}")


class ContingencySpec(_Spec):
    pct: Decimal | None = None
    apply_on: str = ContingencyBase.PRE_TAX.value


class CalculationInput(_Spec):
    """Quantities and unit rates for one trade-show quote."""

    area: AreaInput
    space: SpaceSpec = SpaceSpec()
    construction: ConstructionSpec = ConstructionSpec()
    utilities: UtilitiesSpec = UtilitiesSpec()
    logistics: LogisticsSpec = LogisticsSpec()
    travel: TravelSpec = TravelSpec()
    staff_ops: StaffOpsSpec = StaffOpsSpec()
    marketing: MarketingSpec = MarketingSpec()
    tax: TaxSpec = TaxSpec()
    contingency: ContingencySpec = ContingencySpec()


class CalculationResult(BaseModel):
    space: Decimal
    construction: Decimal
    utilities: Decimal
    logistics: Decimal
    travel: Decimal
    staff_ops: Decimal
    marketing: Decimal
    subtotal: Decimal
    tax: Decimal
    contingency: Decimal
    grand_total: Decimal
    area_sqm: Decimal
    area_sqft: Decimal
    per_sqm: Decimal
    per_sqft: Decimal
    breakdown: dict[str, Decimal]

    class Config:
        frozen = True

    def category_total(self, category: CostCategory) -> Decimal:
        return getattr(self, category.value)
