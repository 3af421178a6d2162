"""
Ticket numbering and persistence.
Numbers are TKT-<epoch ms>-<7 random base36 chars>. They are not checked against
existing rows; a clash surfaces as TicketConflictError and is never retried.
Any other constraint failure surfaces as UpstreamError.
"""

import secrets
import string
import time
from datetime import datetime
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.exceptions import TicketConflictError, UpstreamError
from app.models.ticket import Ticket
from app.utils.logger import get_logger

logger = get_logger(__name__)

BASE36_ALPHABET = string.digits + string.ascii_uppercase
SUFFIX_LENGTH = 7


def generate_ticket_number(now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    suffix = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"TKT-{now_ms}-{suffix}"


def create_ticket(db: Session, *, conductor_id, route_number, origin, destination,
                  passenger_name, passenger_type, fare_amount, payment_method,
                  passenger_count=1, seat_number=None, ticket_number=None) -> Ticket:
    """Insert one ticket stamped with the current time and return the stored row."""
    ticket = Ticket(
        ticket_number=ticket_number or generate_ticket_number(),
        conductor_id=conductor_id,
        route_number=route_number,
        origin=origin,
        destination=destination,
        passenger_name=passenger_name,
        passenger_type=passenger_type,
        passenger_count=passenger_count or 1,
        fare_amount=fare_amount,
        payment_method=payment_method,
        seat_number=seat_number,
        ticket_date=datetime.utcnow(),
    )
    db.add(ticket)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Ticket {ticket.ticket_number} rejected by store: {e.orig}")
        if "ticket_number" in str(e.orig):
            raise TicketConflictError(f"Ticket number {ticket.ticket_number} already exists") from e
        raise UpstreamError(f"Ticket rejected by store: {e.orig}") from e
    db.refresh(ticket)
    logger.info(f"🎫 Ticket {ticket.ticket_number} | route={route_number} | "
                f"{passenger_count}×{passenger_type} | fare={fare_amount}")
    return ticket
