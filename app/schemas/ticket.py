from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from decimal import Decimal
from typing import Optional


class TicketCreate(BaseModel):
    """Body of POST /tickets. Field names arrive in camelCase."""
    conductor_id: int
    route_number: str
    origin: str
    destination: str
    passenger_name: str
    passenger_type: str
    passenger_count: Optional[int] = 1
    fare_amount: Decimal
    payment_method: str
    seat_number: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True


class TicketOut(BaseModel):
    id: int
    ticket_number: str
    conductor_id: Optional[int]
    route_number: Optional[str]
    origin: Optional[str]
    destination: Optional[str]
    passenger_name: Optional[str]
    passenger_type: Optional[str]
    passenger_count: int
    fare_amount: Optional[float]
    payment_method: Optional[str]
    seat_number: Optional[str]
    ticket_date: datetime

    class Config:
        from_attributes = True


class TicketGenerateRequest(BaseModel):
    prompt: Optional[str] = None
    conductor_id: Optional[int] = None
    conductor_route: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True
