"""HTTP tests for the assistant endpoints (Gemini replaced by FakeLLM)."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.exceptions import LLMError
from conftest import extraction_reply


def converse(client, text, **extra):
    return client.post("/api/chat/conversation",
                       json={"messages": [{"role": "user", "content": text}], **extra})


class TestChat:
    def test_missing_question(self, client):
        assert client.post("/api/chat", json={}).status_code == 400
        assert client.post("/api/chat", json={"question": "  "}).status_code == 400

    def test_answer(self, client, fake_llm):
        fake_llm.queue("Two routes are active.")
        body = client.post("/api/chat", json={"question": "How many routes?"}).json()
        assert body["success"] is True
        assert body["answer"] == "Two routes are active."
        assert body["context"] == {"routesCount": 2, "ticketsCount": 0, "conductorsCount": 1}

    def test_model_failure_is_500(self, client, fake_llm):
        fake_llm.queue(LLMError("quota exceeded"))
        response = client.post("/api/chat", json={"question": "q"})
        assert response.status_code == 500
        assert response.json()["success"] is False
        assert response.json()["details"] == "quota exceeded"


class TestConversation:
    def test_missing_or_empty_messages(self, client):
        assert client.post("/api/chat/conversation", json={}).status_code == 400
        assert client.post("/api/chat/conversation", json={"messages": []}).status_code == 400

    def test_question(self, client, fake_llm):
        fake_llm.queue("Route 12.")
        body = converse(client, "Which route is busiest?").json()
        assert body == {"success": True, "answer": "Route 12."}

    def test_ticket_generation(self, client, fake_llm):
        fake_llm.queue(extraction_reply(passengerType="senior"))
        response = converse(client, "book ticket for a senior", conductorId=1, conductorRoute="12")
        body = response.json()
        assert response.status_code == 200
        assert body["ticketGenerated"] is True
        assert body["ticket"]["fare_amount"] == 75
        assert body["ticket"]["ticket_number"] in body["answer"]

    def test_ticket_generation_failure_is_500(self, client, fake_llm):
        fake_llm.queue("I could not understand that")
        response = converse(client, "create ticket", conductorId=1)
        assert response.status_code == 500
        assert response.json()["answer"].startswith("❌ Failed to generate ticket:")


class TestChatHistory:
    def test_history_then_clear(self, client, fake_llm):
        fake_llm.queue("Hello!")
        converse(client, "hi", conductorId=1)

        history = client.get("/api/chat/history/1").json()
        assert [(m["role"], m["content"]) for m in history] == [("user", "hi"), ("assistant", "Hello!")]
        assert len(client.get("/api/chat/history/1", params={"limit": 1}).json()) == 1

        assert client.delete("/api/chat/history/1").json() == {"success": True}
        assert client.get("/api/chat/history/1").json() == []


class TestGenerateTicket:
    def test_children_group_ticket(self, client, fake_llm):
        fake_llm.queue(extraction_reply(routeNumber="12", origin="Central", destination="Airport",
                                        passengerType="child", passengerCount=2))
        response = client.post("/api/tickets/generate", json={
            "prompt": "book a ticket from Central to Airport for 2 children",
            "conductorId": 1,
        })
        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert body["ticket"]["passenger_type"] == "child"
        assert body["ticket"]["passenger_count"] == 2
        assert body["ticket"]["fare_amount"] == 100      # round(100 × 0.5) × 2
        assert body["ticket"]["ticket_number"] in body["message"]

    def test_missing_fields(self, client):
        assert client.post("/api/tickets/generate", json={"prompt": "x"}).status_code == 400
        assert client.post("/api/tickets/generate", json={"conductorId": 1}).status_code == 400

    def test_route_not_found_is_500(self, client, fake_llm):
        fake_llm.queue(extraction_reply(routeNumber="404"))
        response = client.post("/api/tickets/generate", json={"prompt": "x", "conductorId": 1})
        assert response.status_code == 500
        assert response.json()["details"] == "Route not found"
