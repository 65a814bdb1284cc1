"""Product Service — FastAPI application serving demo products and forecasts."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.responses import RedirectResponse
from starlette.convertors import Convertor, register_url_convertor

from common.models import (
    AddProductModel,
    Product,
    UpdateProductModel,
    WeatherForecast,
    with_overrides,
)
from product_service.config import Settings, settings as default_settings
from product_service.logging_config import setup_logging
from product_service.randomizer import RandomHelper
from product_service.repository import InMemoryProductRepository, ProductRepository

logger = logging.getLogger(__name__)

FORECAST_DAYS = 5


class SignedIntConvertor(Convertor):
    """Path segment matching integers, negative ones included."""

    regex = "-?[0-9]+"

    def convert(self, value: str) -> int:
        return int(value)

    def to_string(self, value: int) -> str:
        return str(int(value))


register_url_convertor("signed_int", SignedIntConvertor())

router = APIRouter()


def get_repository(request: Request) -> ProductRepository:
    return request.app.state.repository


def get_randomizer(request: Request) -> RandomHelper:
    return request.app.state.randomizer


@router.get(
    "/weatherforecast",
    response_model=list[WeatherForecast],
    name="GetWeatherForecast",
)
async def get_weather_forecast(randomizer: RandomHelper = Depends(get_randomizer)):
    now = datetime.now()
    return [
        WeatherForecast(
            date=now + timedelta(days=index),
            temperature_c=randomizer.temperature(),
            summary=randomizer.summary(),
        )
        for index in range(1, FORECAST_DAYS + 1)
    ]


@router.get(
    "/products/{product_id:signed_int}",
    response_model=Product,
    responses={404: {"description": "Product not found"}},
)
async def get_product(
    product_id: int,
    repository: ProductRepository = Depends(get_repository),
):
    product = await repository.get_product(product_id)
    if product is None:
        return Response(status_code=404)
    return product


@router.post("/products", response_model=AddProductModel)
async def create_product(
    payload: AddProductModel,
    randomizer: RandomHelper = Depends(get_randomizer),
):
    created = with_overrides(
        payload, id=randomizer.random_number(), name=randomizer.random_name()
    )
    logger.info(created.model_dump_json(by_alias=True))
    return created


@router.put("/products/{product_id:signed_int}", response_model=UpdateProductModel)
async def update_product(product_id: int, payload: UpdateProductModel):
    # Nothing is written back; the payload is echoed with the path id.
    return with_overrides(payload, id=product_id)


def create_app(
    settings: Settings | None = None,
    repository: ProductRepository | None = None,
    randomizer: RandomHelper | None = None,
) -> FastAPI:
    """Build the application with explicit collaborators.

    Anything left as ``None`` falls back to the module settings, the
    in-memory repository and an unseeded ``RandomHelper``.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        logger.info("%s %s starting up", settings.project_name, settings.api_version)
        yield
        logger.info("%s shutting down", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.repository = repository or InMemoryProductRepository()
    app.state.randomizer = randomizer or RandomHelper()

    app.include_router(router)

    async def fallback():
        return RedirectResponse(settings.fallback_url, status_code=302)

    # Registered last so every other route, docs included, matches first.
    # HEAD is left out so it reaches the GET routes' 405 instead of redirecting.
    app.add_api_route(
        "/{path:path}",
        fallback,
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        include_in_schema=False,
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
