"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from expocost.config import get_settings
from expocost.logging_config import setup_logging
from expocost.routers import calculations, rate_cards

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, json_output=settings.log_json)
    yield


app = FastAPI(
    title="Trade Show Cost Estimator",
    description="Itemized, taxed and contingency-adjusted exhibition cost estimates",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculations.router)
app.include_router(rate_cards.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
