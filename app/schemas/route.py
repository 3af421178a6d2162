from pydantic import BaseModel
from typing import Optional


class RouteOut(BaseModel):
    id: int
    route_number: str
    origin: str
    destination: str
    base_fare: float
    distance_km: Optional[float]
    duration_minutes: Optional[int]

    class Config:
        from_attributes = True
