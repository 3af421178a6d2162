"""Unit tests for free-text ticket extraction and generation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from app.exceptions import ExtractionError, NotFoundError
from app.models.ticket import Ticket
from app.services import store
from app.services.ticket_extractor import TicketExtractor
from conftest import FakeLLM, extraction_reply


class TestExtract:
    def test_strips_code_fence(self, seeded):
        llm = FakeLLM([extraction_reply(passengerType="child", passengerCount=2)])
        extracted = TicketExtractor(seeded, llm).extract("two kids", store.list_routes(seeded))
        assert extracted.passenger_type == "child"
        assert extracted.passenger_count == 2
        assert extracted.route_number == "12"

    def test_prompt_lists_routes_and_request(self, seeded):
        llm = FakeLLM([extraction_reply()])
        TicketExtractor(seeded, llm).extract("one adult please", store.list_routes(seeded))
        prompt = llm.calls[0][0]["parts"][0]["text"]
        assert "Route 21: Market Square to University" in prompt
        assert 'User request: "one adult please"' in prompt

    def test_normalises_model_output(self, seeded):
        llm = FakeLLM(['{"routeNumber": 21, "passengerType": "CHILD", "paymentMethod": "UPI", '
                       '"passengerName": "", "passengerCount": null, "seatNumber": 7}'])
        extracted = TicketExtractor(seeded, llm).extract("x", [])
        assert extracted.route_number == "21"
        assert extracted.passenger_type == "child"
        assert extracted.payment_method == "upi"
        assert extracted.passenger_name == "Passenger"
        assert extracted.passenger_count == 1
        assert extracted.seat_number == "7"

    def test_non_json_output(self, seeded):
        llm = FakeLLM(["Sure! Here is your ticket."])
        with pytest.raises(ExtractionError):
            TicketExtractor(seeded, llm).extract("x", [])

    def test_json_array_rejected(self, seeded):
        llm = FakeLLM(["[1, 2, 3]"])
        with pytest.raises(ExtractionError):
            TicketExtractor(seeded, llm).extract("x", [])

    @pytest.mark.parametrize("fields", [
        {"passengerType": "veteran"},
        {"paymentMethod": "cheque"},
        {"passengerCount": 0},
        {"passengerCount": "many"},
    ])
    def test_invalid_fields(self, seeded, fields):
        llm = FakeLLM([extraction_reply(**fields)])
        with pytest.raises(ExtractionError):
            TicketExtractor(seeded, llm).extract("x", [])


class TestGenerate:
    def test_group_fare_rounds_per_passenger(self, seeded):
        llm = FakeLLM([extraction_reply(routeNumber="21", origin=None, destination=None,
                                        passengerType="child", passengerCount=2)])
        ticket, message = TicketExtractor(seeded, llm).generate("2 kids to University", conductor_id=1)

        assert ticket.fare_amount == 46          # round(45 × 0.5) × 2
        assert ticket.passenger_count == 2
        assert ticket.origin == "Market Square"  # copied from the route
        assert ticket.destination == "University"
        assert ticket.conductor_id == 1
        assert ticket.ticket_number in message

    def test_falls_back_to_conductor_route(self, seeded):
        llm = FakeLLM([extraction_reply(routeNumber=None)])
        ticket, _ = TicketExtractor(seeded, llm).generate("one adult", 1, conductor_route="12")
        assert ticket.route_number == "12"
        assert ticket.fare_amount == 100

    def test_unknown_route(self, seeded):
        llm = FakeLLM([extraction_reply(routeNumber="99")])
        with pytest.raises(NotFoundError, match="Route not found"):
            TicketExtractor(seeded, llm).generate("x", 1, conductor_route="12")
        assert seeded.query(Ticket).count() == 0

    def test_no_route_at_all(self, seeded):
        llm = FakeLLM([extraction_reply(routeNumber=None)])
        with pytest.raises(NotFoundError):
            TicketExtractor(seeded, llm).generate("x", 1)
