"""Ticket statistics: counts and revenue, optionally per conductor and per day."""

from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.routers.tickets import parse_date_param
from app.schemas.statistics import StatisticsOut
from app.services import store
from app.services.statistics_service import aggregate

router = APIRouter()


@router.get("/statistics", response_model=StatisticsOut, summary="Ticket statistics")
def get_statistics(conductorId: Optional[int] = None, date: Optional[str] = None,
                   db: Session = Depends(get_db)):
    tickets = store.query_tickets(db, conductor_id=conductorId, on_date=parse_date_param(date))
    stats = aggregate(tickets)
    return StatisticsOut(
        total_tickets={"count": stats.count},
        total_revenue=float(stats.total_revenue),
        tickets_by_type=stats.by_type,
        tickets_by_route=stats.by_route,
    )
