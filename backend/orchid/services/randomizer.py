"""Orchid Dashboard: Faker-backed mock data layer.

Overwrites the "soft" display fields of each record with synthetic values.
Always returns new records; the input list and its dicts are left untouched.
"""
from typing import Any, Callable

from faker import Faker

Record = dict[str, Any]


class Randomizer:
    """Produces randomized views of fixture or API records."""

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.faker = Faker(locale)
        if seed is not None:
            self.faker.seed_instance(seed)

        self._generators: dict[str, dict[str, Callable[[], str]]] = {
            "users": {
                "name": self.faker.name,
                "email": self.faker.email,
                "position": self.faker.job,
                "country": self.faker.country,
            },
            "products": {
                "price": self._price,
                "technology": self.faker.catch_phrase,
                "description": lambda: self.faker.paragraph(nb_sentences=3),
            },
        }

    def _price(self) -> str:
        return f"{self.faker.pyfloat(min_value=1, max_value=1000, right_digits=2):.2f}"

    def soft_fields(self, endpoint: str) -> list[str]:
        return list(self._generators.get(endpoint, {}))

    def randomize(self, endpoint: str, records: list[Record]) -> list[Record]:
        generators = self._generators.get(endpoint)
        if not generators:
            return [dict(r) for r in records]
        return [
            {**record, **{field: generate() for field, generate in generators.items()}}
            for record in records
        ]
