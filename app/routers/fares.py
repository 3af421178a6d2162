"""Fare quote endpoint. Quotes are per passenger; the passenger count is not applied here."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.fare import FareRequest, FareOut
from app.services import store
from app.services.fare_service import calculate_fare

router = APIRouter()


@router.post("/calculate-fare", response_model=FareOut, summary="Quote a fare")
def quote_fare(body: FareRequest, db: Session = Depends(get_db)):
    route = store.get_route(db, body.route_number)
    if not route:
        raise HTTPException(status_code=404, detail="Route not found")
    return {"fare": int(calculate_fare(route.base_fare, body.passenger_type))}
