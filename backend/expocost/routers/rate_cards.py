"""Rate card API - market default rates and rate-card based estimates."""
from fastapi import APIRouter, HTTPException

from expocost.engine.calculator import CalculationEngine
from expocost.engine.errors import CalculationError
from expocost.engine.rate_cards import RATE_CARDS, UnknownRateCard, build_calculation_input, get_rate_card
from expocost.schemas.calculation import CalculationResult
from expocost.schemas.rate_card import BoothQuantities, RateCard

router = APIRouter(prefix="/rate-cards", tags=["rate-cards"])


def _card_or_404(name: str) -> RateCard:
    try:
        return get_rate_card(name)
    except UnknownRateCard:
        raise HTTPException(status_code=404, detail="Rate card not found")


@router.get("", response_model=list[str])
async def list_rate_cards():
    return sorted(RATE_CARDS)


@router.get("/{name}", response_model=RateCard)
async def get_card(name: str):
    return _card_or_404(name)


@router.post("/{name}/estimate", response_model=CalculationResult)
async def estimate(name: str, quantities: BoothQuantities):
    """Price a booth using the named market's default rates."""
    card = _card_or_404(name)
    engine = CalculationEngine()
    try:
        return engine.calculate(build_calculation_input(card, quantities))
    except CalculationError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc
