"""Base generator class for all sample data generators."""

from __future__ import annotations

import random
from abc import ABC
from decimal import Decimal

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all sample data generators.

    Provides common initialization: Faker instance creation and
    seed-based reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``es_ES``).
    """

    def __init__(self, seed: int | None = None, locale: str = "es_ES") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def new_id(self) -> str:
        return self.fake.uuid4()

    @staticmethod
    def money(low: float, high: float) -> Decimal:
        """Random amount in ``[low, high]`` rounded to cents."""
        return Decimal(str(round(random.uniform(low, high), 2)))
