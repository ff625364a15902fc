"""Calculation API routes."""
from fastapi import APIRouter, HTTPException

from expocost.engine.calculator import CalculationEngine
from expocost.engine.errors import CalculationError
from expocost.schemas.calculation import CalculationInput, CalculationResult

router = APIRouter(prefix="/calculations", tags=["calculations"])


@router.post("", response_model=CalculationResult)
async def create_calculation(data: CalculationInput):
    engine = CalculationEngine()
    try:
        return engine.calculate(data)
    except CalculationError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc
