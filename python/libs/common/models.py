"""Shared Pydantic models used across Python services."""

from __future__ import annotations

from datetime import datetime
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

ModelT = TypeVar("ModelT", bound=BaseModel)


class ValueModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Category(ValueModel):
    id: int
    name: str


class ProductBase(ValueModel):
    id: int
    name: str
    category: Category | None = None


class Product(ProductBase):
    pass


class ProductPayload(ProductBase):
    """Request body; missing id or name fall back to zero values."""

    id: int = 0
    name: str = ""


class AddProductModel(ProductPayload):
    pass


class UpdateProductModel(ProductPayload):
    pass


class WeatherForecast(ValueModel):
    date: datetime
    temperature_c: int
    summary: str | None = None

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        # int() truncates toward zero
        return 32 + int(self.temperature_c / 0.5556)


def with_overrides(model: ModelT, **fields) -> ModelT:
    """Return a copy of ``model`` with ``fields`` replaced.

    The source instance is left untouched; field names are the Python
    attribute names, not the JSON aliases.
    """
    return model.model_copy(update=fields)
