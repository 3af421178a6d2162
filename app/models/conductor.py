"""Conductors table — staff who issue tickets and log in to the app."""

from sqlalchemy import Column, Integer, String
from app.database import Base


class Conductor(Base):
    __tablename__ = "conductors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(200), nullable=False)   # plaintext, see auth_service
    name = Column(String(200))
    employee_id = Column(String(50))
    route_number = Column(String(20))

    def __repr__(self):
        return f"<Conductor {self.id} {self.username} route={self.route_number}>"
