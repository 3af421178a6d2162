"""
Tickets table — one row per issuance, written once and never updated.
Origin/destination are copied from the route at issuance time.
"""

from sqlalchemy import Column, Integer, String, DateTime, Numeric
from app.database import Base


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ticket_number = Column(String(50), unique=True, nullable=False, index=True)
    conductor_id = Column(Integer, index=True)
    route_number = Column(String(20), index=True)
    origin = Column(String(200))
    destination = Column(String(200))
    passenger_name = Column(String(200))
    passenger_type = Column(String(20))      # adult | child | student | senior
    passenger_count = Column(Integer, default=1, nullable=False)
    fare_amount = Column(Numeric(10, 2))
    payment_method = Column(String(20))      # cash | card | upi
    seat_number = Column(String(20))
    ticket_date = Column(DateTime, nullable=False, index=True)

    def __repr__(self):
        return f"<Ticket {self.ticket_number} route={self.route_number} fare={self.fare_amount}>"
