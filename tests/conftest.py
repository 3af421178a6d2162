"""Shared fixtures: in-memory SQLite database, seeded rows, fake Gemini client."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["GEMINI_API_KEY"] = ""

import json
import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from app.database import SessionLocal, create_tables, drop_tables
from app.dependencies import get_llm_client
from app.main import app
from app.models.conductor import Conductor
from app.models.route import Route
from app.services.llm_client import GeminiClient


class FakeLLM(GeminiClient):
    """Replies from a queue instead of calling Gemini. Records every request's contents."""

    def __init__(self, replies=None):
        super().__init__(api_key="test-key", model="fake-model", base_url="http://llm.invalid")
        self.replies = list(replies or [])
        self.calls = []

    def queue(self, *replies):
        self.replies.extend(replies)

    def generate_contents(self, contents):
        self.calls.append(contents)
        if not self.replies:
            return "OK"
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def extraction_reply(**fields) -> str:
    """A model reply for ticket extraction, wrapped in a code fence like Gemini tends to do."""
    data = {
        "routeNumber": "12",
        "origin": "Central",
        "destination": "Airport",
        "passengerName": "Passenger",
        "passengerType": "adult",
        "passengerCount": 1,
        "paymentMethod": "cash",
        "seatNumber": None,
    }
    data.update(fields)
    return "```json\n" + json.dumps(data) + "\n```"


@pytest.fixture
def db():
    drop_tables()
    create_tables()
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def seeded(db):
    db.add_all([
        Route(route_number="12", origin="Central", destination="Airport",
              base_fare=Decimal("100"), distance_km=Decimal("18"), duration_minutes=40),
        Route(route_number="21", origin="Market Square", destination="University",
              base_fare=Decimal("45"), distance_km=Decimal("7.5"), duration_minutes=20),
        Conductor(username="conductor1", password="pass1", name="Ravi Kumar",
                  employee_id="EMP001", route_number="12"),
    ])
    db.commit()
    return db


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def client(seeded, fake_llm):
    app.dependency_overrides[get_llm_client] = lambda: fake_llm
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
