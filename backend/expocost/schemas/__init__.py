"""Pydantic schemas."""
from expocost.schemas.calculation import (
    AreaInput,
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
from expocost.schemas.rate_card import BoothQuantities, RateCard

__all__ = [
    "AreaInput",
    "CalculationInput",
    "CalculationResult",
    "ConstructionSpec",
    "ContingencyBase",
    "ContingencySpec",
    "CostBasis",
    "CostCategory",
    "LogisticsSpec",
    "MarketingSpec",
    "SpaceSpec",
    "StaffOpsSpec",
    "TaxSpec",
    "TravelSpec",
    "UtilitiesSpec",
    "BoothQuantities",
    "RateCard",
]
