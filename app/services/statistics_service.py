"""
Ticket statistics.
Shared by GET /statistics and the assistant's prompt context, so both report the same numbers.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable


@dataclass
class TicketStatistics:
    count: int = 0
    total_revenue: Decimal = Decimal("0")
    by_type: dict = field(default_factory=dict)
    by_route: dict = field(default_factory=dict)


def _group_key(value) -> str:
    """Missing values are counted under "null" so keys stay JSON strings."""
    return "null" if value is None else str(value)


def aggregate(tickets: Iterable) -> TicketStatistics:
    stats = TicketStatistics()
    for t in tickets:
        stats.count += 1
        if t.fare_amount is not None:
            stats.total_revenue += Decimal(str(t.fare_amount))
        type_key = _group_key(t.passenger_type)
        route_key = _group_key(t.route_number)
        stats.by_type[type_key] = stats.by_type.get(type_key, 0) + 1
        stats.by_route[route_key] = stats.by_route.get(route_key, 0) + 1
    return stats
