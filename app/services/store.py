"""
Query helpers over the routes / tickets / conductors tables.
Thin filter-order-limit wrappers shared by the routers and the assistant.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional
from sqlalchemy.orm import Session
from app.config import settings
from app.models.conductor import Conductor
from app.models.route import Route
from app.models.ticket import Ticket


@dataclass
class ContextBundle:
    """Snapshot of the data handed to the language model."""
    routes: list = field(default_factory=list)
    tickets: list = field(default_factory=list)
    conductors: list = field(default_factory=list)


def list_routes(db: Session) -> list[Route]:
    return db.query(Route).order_by(Route.route_number.asc()).all()


def get_route(db: Session, route_number) -> Optional[Route]:
    if route_number is None:
        return None
    return db.query(Route).filter(Route.route_number == str(route_number)).first()


def get_ticket(db: Session, ticket_number: str) -> Optional[Ticket]:
    return db.query(Ticket).filter(Ticket.ticket_number == ticket_number).first()


def query_tickets(db: Session, conductor_id: Optional[int] = None,
                  on_date: Optional[date] = None) -> list[Ticket]:
    """Tickets newest first, optionally for one conductor and one calendar day."""
    q = db.query(Ticket)
    if conductor_id is not None:
        q = q.filter(Ticket.conductor_id == conductor_id)
    if on_date is not None:
        start = datetime.combine(on_date, datetime.min.time())
        q = q.filter(Ticket.ticket_date >= start, Ticket.ticket_date < start + timedelta(days=1))
    return q.order_by(Ticket.ticket_date.desc()).all()


def recent_tickets(db: Session, limit: int) -> list[Ticket]:
    return db.query(Ticket).order_by(Ticket.ticket_date.desc()).limit(limit).all()


def list_conductors(db: Session) -> list[Conductor]:
    return db.query(Conductor).order_by(Conductor.id.asc()).all()


def get_conductor_by_username(db: Session, username: str) -> Optional[Conductor]:
    return db.query(Conductor).filter(Conductor.username == username).first()


def fetch_context(db: Session, ticket_limit: Optional[int] = None) -> ContextBundle:
    """All routes, the most recent tickets and all conductors."""
    return ContextBundle(
        routes=db.query(Route).all(),
        tickets=recent_tickets(db, ticket_limit or settings.CONTEXT_TICKET_LIMIT),
        conductors=list_conductors(db),
    )
