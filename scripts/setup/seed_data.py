"""
Seed sample routes and conductors for local development.
Existing rows (matched by route number / username) are left untouched.
Usage: python scripts/setup/seed_data.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from decimal import Decimal
from app.database import SessionLocal, create_tables
from app.models.conductor import Conductor
from app.models.route import Route

ROUTES = [
    # route_number, origin, destination, base_fare, distance_km, duration_minutes
    ("10", "Central Station", "Airport", Decimal("120"), Decimal("24.5"), 55),
    ("12", "Central", "Airport", Decimal("100"), Decimal("18.0"), 40),
    ("21", "Market Square", "University", Decimal("40"), Decimal("7.2"), 20),
    ("33", "Harbour", "Tech Park", Decimal("65"), Decimal("12.8"), 35),
]

CONDUCTORS = [
    # username, password, name, employee_id, route_number
    ("conductor1", "pass1", "Ravi Kumar", "EMP001", "12"),
    ("conductor2", "pass2", "Anita Sharma", "EMP002", "21"),
]


def main():
    create_tables()
    db = SessionLocal()
    try:
        added = 0
        for number, origin, destination, fare, distance, duration in ROUTES:
            if db.query(Route).filter(Route.route_number == number).first():
                continue
            db.add(Route(route_number=number, origin=origin, destination=destination,
                         base_fare=fare, distance_km=distance, duration_minutes=duration))
            added += 1
        for username, password, name, employee_id, route_number in CONDUCTORS:
            if db.query(Conductor).filter(Conductor.username == username).first():
                continue
            db.add(Conductor(username=username, password=password, name=name,
                             employee_id=employee_id, route_number=route_number))
            added += 1
        db.commit()
        print(f"✅ Seeded {added} new rows")
    finally:
        db.close()


if __name__ == "__main__":
    main()
