from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class TicketCount(BaseModel):
    count: int


class StatisticsOut(BaseModel):
    """Serialized with camelCase keys."""
    total_tickets: TicketCount
    total_revenue: float
    tickets_by_type: dict[str, int]
    tickets_by_route: dict[str, int]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
