"""
Shared test fixtures - engine, API client, reference inputs.
"""

import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("EXPOCOST_APP_ENV", "test")

from expocost.config import Settings, get_settings
from expocost.engine.calculator import CalculationEngine
from expocost.main import app
from expocost.schemas.calculation import CalculationInput


@pytest.fixture
def engine():
    """Engine with explicit settings so .env files never leak in."""
    return CalculationEngine(Settings(money_places=2))


@pytest.fixture
def client():
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def reference_input():
    """18 sqm booth priced from validated flat amounts, no tax or contingency."""
    return CalculationInput.model_validate({
        "area": {"value": "18", "unit": "sqm"},
        "space": {"flat": "63000"},
        "construction": {"flat": "270000"},
        "travel": {"team_count": 0},
        "staff_ops": {"ops_misc": "144000"},
        "marketing": {"other": "25000"},
        "tax": {"gst_pct": "0"},
        "contingency": {"pct": "0"},
    })


@pytest.fixture
def rate_based_payload():
    """Full rate-based quote using Indian market rates."""
    return {
        "area": {"value": "18", "unit": "sqm"},
        "space": {"rate_per_sqm": "3500", "location_premium_pct": "0"},
        "construction": {"rate_per_sqm": "15000", "finish_factor": "1.0"},
        "utilities": {"power_kw": "5", "power_rate": "4500", "internet": "12000", "furniture": "18000"},
        "logistics": {"weight_kg": "180", "rate_per_kg": "25"},
        "travel": {
            "team_count": 4,
            "nights": 3,
            "airfare_per_person": "18000",
            "hotel_adr": "8000",
            "local_transport_per_day": "1000",
            "meals_per_person_per_day": "800",
        },
        "staff_ops": {
            "promoters": 2,
            "promoter_days": 3,
            "promoter_rate_per_day": "2000",
            "uniforms": "8000",
            "ops_misc": "16000",
        },
        "marketing": {"print": "15000", "giveaways": "10000", "av": "0"},
        "tax": {
            "gst_pct": "18",
            "tax_space": True,
            "tax_construction": True,
            "tax_utilities": True,
            "tax_logistics": True,
            "tax_travel": False,
            "tax_staff_ops": True,
            "tax_marketing": True,
        },
        "contingency": {"pct": "5", "apply_on": "post_tax"},
    }


@pytest.fixture
def default_rate_card(monkeypatch):
    """Set EXPOCOST_DEFAULT_RATE_CARD for one test and reload settings."""

    def _set(name: str) -> None:
        monkeypatch.setenv("EXPOCOST_DEFAULT_RATE_CARD", name)
        get_settings.cache_clear()

    yield _set
    get_settings.cache_clear()
