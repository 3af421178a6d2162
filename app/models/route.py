"""
Routes table — scheduled bus paths with their base fare.
Read-only for the API; populated by scripts/setup/seed_data.py or by operations staff.
"""

from sqlalchemy import Column, Integer, String, Numeric
from app.database import Base


class Route(Base):
    __tablename__ = "routes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    route_number = Column(String(20), unique=True, nullable=False, index=True)
    origin = Column(String(200), nullable=False)
    destination = Column(String(200), nullable=False)
    base_fare = Column(Numeric(10, 2), nullable=False)
    distance_km = Column(Numeric(8, 2))
    duration_minutes = Column(Integer)

    def __repr__(self):
        return f"<Route {self.route_number} {self.origin}->{self.destination} fare={self.base_fare}>"
