from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class FareRequest(BaseModel):
    route_number: str
    passenger_type: str = "adult"

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True


class FareOut(BaseModel):
    fare: int
