from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional


class LoginRequest(BaseModel):
    username: str
    password: str


class ConductorProfile(BaseModel):
    """Returned by /login, serialized with camelCase keys."""
    id: int
    username: str
    name: Optional[str]
    employee_id: Optional[str]
    route_number: Optional[str]

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
