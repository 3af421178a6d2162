"""
Ticket endpoints.
POST /tickets           — store a ticket built by the client (fare already computed)
POST /tickets/generate  — build a ticket from a free-text prompt via the assistant
GET  /tickets           — list with optional conductor and date filters
GET  /tickets/{number}  — single ticket
"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_assistant
from app.exceptions import TicketConflictError
from app.schemas.ticket import TicketCreate, TicketOut, TicketGenerateRequest
from app.services import store
from app.services.assistant import ChatAssistant
from app.services.ticket_service import create_ticket

router = APIRouter()


def parse_date_param(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="date must be YYYY-MM-DD")


@router.post("/tickets", response_model=TicketOut, summary="Create a ticket")
def create(body: TicketCreate, db: Session = Depends(get_db)):
    try:
        return create_ticket(db, **body.model_dump())
    except TicketConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/tickets/generate", summary="Generate a ticket from a free-text prompt")
def generate(body: TicketGenerateRequest, assistant: ChatAssistant = Depends(get_assistant)):
    if not body.prompt or not body.conductor_id:
        raise HTTPException(status_code=400, detail="Prompt and conductorId are required")

    result = assistant.generate_ticket_from_prompt(body.prompt, body.conductor_id, body.conductor_route)
    if not result["success"]:
        return JSONResponse(status_code=500, content=result)
    return {
        "success": True,
        "ticket": TicketOut.model_validate(result["ticket"]).model_dump(mode="json"),
        "message": result["message"],
    }


@router.get("/tickets", response_model=list[TicketOut], summary="List tickets")
def list_tickets(conductorId: Optional[int] = None, date: Optional[str] = None,
                 db: Session = Depends(get_db)):
    """Newest first. `date` (YYYY-MM-DD) limits results to that calendar day."""
    return store.query_tickets(db, conductor_id=conductorId, on_date=parse_date_param(date))


@router.get("/tickets/{ticket_number}", response_model=TicketOut, summary="Get one ticket")
def get_ticket(ticket_number: str, db: Session = Depends(get_db)):
    ticket = store.get_ticket(db, ticket_number)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return ticket
