"""Random demo values for products and forecasts."""

from __future__ import annotations

from faker import Faker

SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55  # exclusive


class RandomHelper:
    """Wraps a private ``Faker`` so tests can pass a seed."""

    def __init__(self, seed: int | None = None):
        self._faker = Faker()
        if seed is not None:
            self._faker.seed_instance(seed)

    def random_name(self) -> str:
        return self._faker.first_name()

    def random_number(self, low: int = 1, high: int = 1000) -> int:
        return self._faker.random_int(min=low, max=high)

    def temperature(self) -> int:
        return self._faker.random_int(min=MIN_TEMPERATURE_C, max=MAX_TEMPERATURE_C - 1)

    def summary(self) -> str:
        return self._faker.random_element(SUMMARIES)
