"""
Prompt construction for the Gemini assistant.

Each builder turns a ContextBundle (routes, recent tickets, conductors) into the
plain-text block the model answers from. The ordering of the sections is what
the model relies on: routes, statistics, conductors, then samples or the request.
"""

import json
from decimal import Decimal

from app.services.statistics_service import aggregate
from app.services.store import ContextBundle

CONVERSATION_ACK = (
    "I understand. I will help answer questions about the bus ticket system "
    "using the provided data."
)


def _money(value) -> str:
    if value is None:
        return "0"
    amount = Decimal(str(value))
    if amount == amount.to_integral_value():
        return str(amount.quantize(Decimal("1")))
    return str(amount.quantize(Decimal("0.01")))


def _number(value) -> str:
    return "?" if value is None else _money(value)


def _statistics_lines(tickets) -> list[str]:
    stats = aggregate(tickets)
    return [
        f"Total Tickets: {stats.count}",
        f"Total Revenue: ₹{stats.total_revenue.quantize(Decimal('0.01'))}",
        f"Tickets by Type: {json.dumps(stats.by_type)}",
        f"Tickets by Route: {json.dumps(stats.by_route)}",
    ]


def _route_line(r, detailed: bool) -> str:
    line = f"Route {r.route_number}: {r.origin} to {r.destination}, Base Fare: ₹{_money(r.base_fare)}"
    if detailed:
        line += f", Distance: {_number(r.distance_km)}km, Duration: {_number(r.duration_minutes)}min"
    return line


def _conductor_line(c, detailed: bool) -> str:
    if detailed:
        return f"{c.name} ({c.username}) - Employee ID: {c.employee_id}, Route: {c.route_number}"
    return f"{c.name} ({c.username}) - Route {c.route_number}"


def _ticket_line(t) -> str:
    return (
        f"Ticket {t.ticket_number}: Route {t.route_number}, {t.origin} → {t.destination}, "
        f"Passenger: {t.passenger_name} ({t.passenger_type}), Fare: ₹{_money(t.fare_amount)}, "
        f"Date: {t.ticket_date.isoformat() if t.ticket_date else '-'}"
    )


def build_question_prompt(context: ContextBundle, question: str, sample_limit: int = 10) -> str:
    """One-shot prompt: full data context plus the user's question."""
    sections = [
        "You are a helpful bus ticket system assistant. Answer questions based on the following data:",
        "",
        "**ROUTES INFORMATION:**",
        *[f"- {_route_line(r, detailed=True)}" for r in context.routes],
        "",
        f"**RECENT TICKETS (Last {len(context.tickets)}):**",
        *_statistics_lines(context.tickets),
        "",
        "**CONDUCTORS:**",
        *[f"- {_conductor_line(c, detailed=True)}" for c in context.conductors],
        "",
        "**SAMPLE RECENT TICKETS:**",
        *[f"- {_ticket_line(t)}" for t in context.tickets[:sample_limit]],
        "",
        f"**USER QUESTION:** {question}",
        "",
        "Please provide a clear, concise, and helpful answer based on the data above. "
        "If the question requires specific calculations or comparisons, perform them. "
        "If you cannot answer with the available data, politely explain what information is missing.",
    ]
    return "\n".join(sections)


def build_conversation_context(context: ContextBundle) -> str:
    """First turn of a chat session. No sample tickets; the chat history carries specifics."""
    sections = [
        "You are a helpful bus ticket system assistant. You have access to the following data:",
        "",
        f"**ROUTES ({len(context.routes)} total):**",
        *[_route_line(r, detailed=False) for r in context.routes],
        "",
        "**STATISTICS:**",
        *[f"- {line}" for line in _statistics_lines(context.tickets)],
        "",
        f"**CONDUCTORS ({len(context.conductors)} total):**",
        *[_conductor_line(c, detailed=False) for c in context.conductors],
        "",
        "Answer questions clearly and concisely based on this data.",
    ]
    return "\n".join(sections)


def build_extraction_prompt(routes, request_text: str) -> str:
    """Ask the model to turn a free-text booking request into one JSON object."""
    route_lines = "\n".join(
        f"- Route {r.route_number}: {r.origin} to {r.destination}, Fare: ₹{_money(r.base_fare)}"
        for r in routes
    )
    return f"""You are a bus ticket generation assistant. Extract ticket information from natural language requests.

Available Routes:
{route_lines}

Passenger Types and Discounts:
- adult: Full fare (100%)
- child: Half fare (50%)
- student: Student discount (60%)
- senior: Senior discount (75%)

Payment Methods: cash, card, upi

User request: "{request_text}"

Extract and return ONLY a valid JSON object with these fields (no markdown, no explanations, just pure JSON):
{{
  "routeNumber": "route number from available routes",
  "origin": "origin station name",
  "destination": "destination station name",
  "passengerName": "passenger name if mentioned, otherwise 'Passenger'",
  "passengerType": "adult/child/student/senior (default: adult)",
  "passengerCount": number (default: 1),
  "paymentMethod": "cash/card/upi (default: cash)",
  "seatNumber": "seat number if mentioned, otherwise null"
}}

Rules:
1. If route not specified, use conductor's route
2. Match origin/destination to available routes
3. Default passenger type is "adult"
4. Default payment is "cash"
5. Return only the JSON object, no other text"""


def format_ticket_confirmation(ticket) -> str:
    seat_line = f"\n- Seat: {ticket.seat_number}" if ticket.seat_number else ""
    issued = ticket.ticket_date.strftime("%Y-%m-%d %H:%M:%S") if ticket.ticket_date else "-"
    return f"""✅ **Ticket Generated Successfully!**

---

**Ticket Number:** {ticket.ticket_number}

**Route Details:**
- Route: {ticket.route_number}
- From: {ticket.origin}
- To: {ticket.destination}

**Passenger Information:**
- Name: {ticket.passenger_name}
- Type: {(ticket.passenger_type or '').upper()}
- Count: {ticket.passenger_count} passenger(s){seat_line}

**Payment Details:**
- Fare Amount: ₹{_money(ticket.fare_amount)}
- Payment Method: {(ticket.payment_method or '').upper()}

**Booking Information:**
- Date: {issued}
- Conductor ID: {ticket.conductor_id}

---

✅ Ticket saved to database successfully!"""
