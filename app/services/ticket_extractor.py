"""
Free-text ticket generation.

Flow: extraction prompt → Gemini → strip code fences → JSON → ExtractedTicket
validation → route lookup → fare → insert. Bad model output raises
ExtractionError; an unknown route raises NotFoundError. Nothing is retried.
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session
from app.exceptions import ExtractionError, NotFoundError
from app.services import store
from app.services.fare_service import fare_for_passengers
from app.services.llm_client import GeminiClient
from app.services.prompt_builder import build_extraction_prompt, format_ticket_confirmation
from app.services.ticket_service import create_ticket
from app.utils.json_parser import safe_parse_json, strip_code_fences
from app.utils.logger import get_logger

logger = get_logger(__name__)


class ExtractedTicket(BaseModel):
    route_number: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
    passenger_name: str = "Passenger"
    passenger_type: Literal["adult", "child", "student", "senior"] = "adult"
    passenger_count: int = Field(default=1, ge=1)
    payment_method: Literal["cash", "card", "upi"] = "cash"
    seat_number: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True

    @field_validator("*", mode="before")
    @classmethod
    def _blank_means_default(cls, value, info: ValidationInfo):
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        return value

    @field_validator("passenger_type", "payment_method", mode="before")
    @classmethod
    def _lowercase(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class TicketExtractor:
    def __init__(self, db: Session, llm: GeminiClient):
        self.db = db
        self.llm = llm

    def extract(self, request_text: str, routes) -> ExtractedTicket:
        raw = self.llm.generate(build_extraction_prompt(routes, request_text))
        payload = safe_parse_json(strip_code_fences(raw))
        if not isinstance(payload, dict):
            logger.warning(f"Ticket extraction returned non-JSON output: {raw[:200]!r}")
            raise ExtractionError("Model did not return a JSON object")
        try:
            return ExtractedTicket.model_validate(payload)
        except ValidationError as e:
            raise ExtractionError(f"Model returned invalid ticket fields: {e}") from e

    def generate(self, request_text: str, conductor_id: int, conductor_route: Optional[str] = None):
        """Returns (ticket, confirmation message)."""
        routes = store.list_routes(self.db)
        extracted = self.extract(request_text, routes)

        route_number = extracted.route_number or conductor_route
        route = store.get_route(self.db, route_number)
        if not route:
            raise NotFoundError("Route not found")

        fare = fare_for_passengers(route.base_fare, extracted.passenger_type, extracted.passenger_count)
        ticket = create_ticket(
            self.db,
            conductor_id=conductor_id,
            route_number=route.route_number,
            origin=extracted.origin or route.origin,
            destination=extracted.destination or route.destination,
            passenger_name=extracted.passenger_name,
            passenger_type=extracted.passenger_type,
            passenger_count=extracted.passenger_count,
            fare_amount=fare,
            payment_method=extracted.payment_method,
            seat_number=extracted.seat_number,
        )
        return ticket, format_ticket_confirmation(ticket)
