"""
Fare calculation.
Base fare × passenger-type discount, rounded to whole currency units (halves round up).
"""

from decimal import Decimal, ROUND_HALF_UP

DISCOUNTS = {
    "adult": Decimal("1.0"),
    "child": Decimal("0.5"),
    "student": Decimal("0.6"),
    "senior": Decimal("0.75"),
}

PASSENGER_TYPES = tuple(DISCOUNTS)
PAYMENT_METHODS = ("cash", "card", "upi")


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_fare(base_fare, passenger_type: str) -> Decimal:
    """Per-passenger fare. Unknown passenger types pay the full base fare."""
    fare = _to_decimal(base_fare) * DISCOUNTS.get(passenger_type, Decimal("1"))
    return fare.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def fare_for_passengers(base_fare, passenger_type: str, passenger_count: int) -> Decimal:
    """Fare for a group ticket. Each unit is rounded before multiplying by the count."""
    return calculate_fare(base_fare, passenger_type) * max(1, passenger_count or 1)
