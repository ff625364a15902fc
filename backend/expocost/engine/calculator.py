"""Trade-show cost calculation engine - deterministic, Decimal only. Areas in sqm unless noted."""
import logging
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation, Overflow, ROUND_HALF_UP

from expocost.config import Settings, get_settings
from expocost.engine.errors import CalculationError, InvalidArea, InvalidContingencyBase, InvalidRate
from expocost.engine.units import NormalizedArea, normalize_area
from expocost.schemas.calculation import (
    CalculationInput,
    CalculationResult,
    ConstructionSpec,
    ContingencyBase,
    ContingencySpec,
    CostBasis,
    CostCategory,
    LogisticsSpec,
    MarketingSpec,
    SpaceSpec,
    StaffOpsSpec,
    TaxSpec,
    TravelSpec,
    UtilitiesSpec,
)

logger = logging.getLogger(__name__)

_VALIDATED_SECTIONS = (
    "space",
    "construction",
    "utilities",
    "logistics",
    "travel",
    "staff_ops",
    "marketing",
    "tax",
    "contingency",
)


def _amount(value: Decimal | int | None) -> Decimal:
    """Absent inputs count as zero."""
    if value is None:
        return Decimal(0)
    return Decimal(value)


def _pct(value: Decimal | None) -> Decimal:
    return _amount(value) / Decimal(100)


def _parse_contingency_base(apply_on: str | ContingencyBase) -> ContingencyBase:
    if isinstance(apply_on, ContingencyBase):
        return apply_on
    try:
        return ContingencyBase((apply_on or "").strip().lower())
    except ValueError:
        raise InvalidContingencyBase(
            f'Contingency base must be "pre_tax" or "post_tax", got {apply_on!r}',
            field="contingency.apply_on",
        ) from None


def _check_non_negative(section: str, spec) -> None:
    """Every supplied number in a section must be finite and >= 0."""
    for name, value in spec:
        if value is None or isinstance(value, (bool, str)):
            continue
        number = Decimal(value)
        if not number.is_finite():
            raise InvalidRate(f"{section}.{name} must be a finite number", field=f"{section}.{name}")
        if number < 0:
            raise InvalidRate(f"{section}.{name} must be >= 0, got {value}", field=f"{section}.{name}")


@contextmanager
def _out_of_range(error_type: type[CalculationError], field: str):
    """Amounts too large to quantize at the money precision become typed errors."""
    try:
        yield
    except (InvalidOperation, Overflow) as exc:
        raise error_type(f"{field} is out of range for currency precision", field=field) from exc


class CalculationEngine:
    """Stateless quote calculator. Each call validates, prices seven categories, then taxes and buffers."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def _round(self, value: Decimal) -> Decimal:
        """Round to the currency minor unit at every category boundary."""
        quantize = Decimal(10) ** -self.settings.money_places
        return value.quantize(quantize, rounding=ROUND_HALF_UP)

    def validate(self, data: CalculationInput) -> tuple[NormalizedArea, ContingencyBase]:
        """Reject bad input before anything is priced. First violation wins."""
        area = normalize_area(data.area.value, data.area.unit)
        for section in _VALIDATED_SECTIONS:
            _check_non_negative(section, getattr(data, section))
        return area, _parse_contingency_base(data.contingency.apply_on)

    def space(self, spec: SpaceSpec, area_sqm: Decimal) -> Decimal:
        """Space = flat, or area × rate × (1 + location premium %)."""
        if spec.basis == CostBasis.FLAT:
            return self._round(spec.flat)
        premium = Decimal(1) + _pct(spec.location_premium_pct)
        return self._round(area_sqm * _amount(spec.rate_per_sqm) * premium)

    def construction(self, spec: ConstructionSpec, area_sqm: Decimal) -> Decimal:
        """Construction = flat, or area × rate × finish factor (default 1)."""
        if spec.basis == CostBasis.FLAT:
            return self._round(spec.flat)
        finish_factor = spec.finish_factor if spec.finish_factor is not None else Decimal(1)
        return self._round(area_sqm * _amount(spec.rate_per_sqm) * finish_factor)

    def utilities(self, spec: UtilitiesSpec) -> Decimal:
        power = _amount(spec.power_kw) * _amount(spec.power_rate)
        return self._round(
            power
            + _amount(spec.internet)
            + _amount(spec.water)
            + _amount(spec.furniture)
            + _amount(spec.other)
        )

    def logistics(self, spec: LogisticsSpec) -> Decimal:
        """Logistics = flat, or weight, volume and distance charges."""
        if spec.basis == CostBasis.FLAT:
            return self._round(spec.flat)
        return self._round(
            _amount(spec.weight_kg) * _amount(spec.rate_per_kg)
            + _amount(spec.cbm) * _amount(spec.rate_per_cbm)
            + _amount(spec.route_km) * _amount(spec.rate_per_km)
        )

    def travel(self, spec: TravelSpec) -> Decimal:
        """Travel = team × (airfare + nights × (hotel + local transport + meals))."""
        nights = _amount(spec.nights)
        per_person = (
            _amount(spec.airfare_per_person)
            + nights * _amount(spec.hotel_adr)
            + nights * _amount(spec.local_transport_per_day)
            + nights * _amount(spec.meals_per_person_per_day)
        )
        return self._round(_amount(spec.team_count) * per_person)

    def staff_ops(self, spec: StaffOpsSpec) -> Decimal:
        promoter_cost = (
            _amount(spec.promoters)
            * _amount(spec.promoter_days)
            * _amount(spec.promoter_rate_per_day)
        )
        return self._round(promoter_cost + _amount(spec.uniforms) + _amount(spec.ops_misc))

    def marketing(self, spec: MarketingSpec) -> Decimal:
        return self._round(
            _amount(spec.print)
            + _amount(spec.giveaways)
            + _amount(spec.digital)
            + _amount(spec.av)
            + _amount(spec.other)
        )

    def tax(self, spec: TaxSpec, totals: dict[CostCategory, Decimal]) -> Decimal:
        """GST on flagged categories only. No range check on the rate."""
        gst_rate = _pct(spec.gst_pct)
        if gst_rate == 0:
            return self._round(Decimal(0))
        taxable = sum(
            (amount for category, amount in totals.items() if spec.is_taxed(category)),
            Decimal(0),
        )
        return self._round(taxable * gst_rate)

    def contingency(
        self,
        spec: ContingencySpec,
        base: ContingencyBase,
        subtotal: Decimal,
        tax: Decimal,
    ) -> Decimal:
        """Contingency % on the subtotal, or on subtotal + tax when post-tax."""
        rate = _pct(spec.pct)
        if rate == 0:
            return self._round(Decimal(0))
        amount = subtotal + tax if base == ContingencyBase.POST_TAX else subtotal
        return self._round(amount * rate)

    def calculate(self, data: CalculationInput) -> CalculationResult:
        try:
            return self._price(data)
        except CalculationError as exc:
            logger.warning(
                "Rejected calculation input: %s",
                exc,
                extra={"error_code": exc.code},
            )
            raise

    def _price(self, data: CalculationInput) -> CalculationResult:
        area, contingency_base = self.validate(data)

        category_specs = {
            CostCategory.SPACE: lambda: self.space(data.space, area.area_sqm),
            CostCategory.CONSTRUCTION: lambda: self.construction(data.construction, area.area_sqm),
            CostCategory.UTILITIES: lambda: self.utilities(data.utilities),
            CostCategory.LOGISTICS: lambda: self.logistics(data.logistics),
            CostCategory.TRAVEL: lambda: self.travel(data.travel),
            CostCategory.STAFF_OPS: lambda: self.staff_ops(data.staff_ops),
            CostCategory.MARKETING: lambda: self.marketing(data.marketing),
        }
        totals: dict[CostCategory, Decimal] = {}
        for category, compute in category_specs.items():
            with _out_of_range(InvalidRate, category.value):
                totals[category] = compute()

        subtotal = sum(totals.values(), Decimal(0))
        with _out_of_range(InvalidRate, "tax"):
            tax = self.tax(data.tax, totals)
        with _out_of_range(InvalidRate, "contingency"):
            contingency = self.contingency(data.contingency, contingency_base, subtotal, tax)
        grand_total = subtotal + tax + contingency

        # Per-area figures blow up only when the area is vanishingly small.
        with _out_of_range(InvalidArea, "area.value"):
            result = CalculationResult(
                **{category.value: amount for category, amount in totals.items()},
                subtotal=subtotal,
                tax=tax,
                contingency=contingency,
                grand_total=grand_total,
                area_sqm=self._round(area.area_sqm),
                area_sqft=self._round(area.area_sqft),
                per_sqm=self._round(grand_total / area.area_sqm),
                per_sqft=self._round(grand_total / area.area_sqft),
                breakdown={
                    category.value: self._round(amount / area.area_sqm)
                    for category, amount in totals.items()
                },
            )
        logger.debug(
            "Calculated quote for %s sqm: subtotal=%s tax=%s contingency=%s",
            area.area_sqm,
            subtotal,
            tax,
            contingency,
            extra={"grand_total": grand_total},
        )
        return result


def calculate(data: CalculationInput) -> CalculationResult:
    """Price one quote with the default settings."""
    return CalculationEngine().calculate(data)
