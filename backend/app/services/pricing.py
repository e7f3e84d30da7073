# app/services/pricing.py
import math
from decimal import Decimal
from typing import Union

SERVICE_FEE_RATE = Decimal("0.1")


def calculate_total_cost(nights: int, nightly_rate: Union[Decimal, int, float, str]) -> int:
    """
    Nightly rate plus a flat 10% service fee, over all nights,
    rounded up to the next whole currency unit.

    Guest count never enters the price.
    """
    if nights < 1:
        raise ValueError("nights must be at least 1")

    # str() so floats are taken at their printed value, not their binary one
    rate = Decimal(str(nightly_rate))
    if rate <= 0:
        raise ValueError("nightly_rate must be positive")

    return math.ceil(nights * (rate + rate * SERVICE_FEE_RATE))
