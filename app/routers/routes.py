"""Route lookup endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.route import RouteOut
from app.services import store

router = APIRouter()


@router.get("/routes", response_model=list[RouteOut], summary="List all routes")
def list_routes(db: Session = Depends(get_db)):
    """All routes ordered by route number."""
    return store.list_routes(db)


@router.get("/routes/{route_number}", response_model=RouteOut, summary="Get one route")
def get_route(route_number: str, db: Session = Depends(get_db)):
    route = store.get_route(db, route_number)
    if not route:
        raise HTTPException(status_code=404, detail="Route not found")
    return route
