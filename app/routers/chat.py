"""
Assistant endpoints.
POST   /chat                  — one-shot question over the current data
POST   /chat/conversation     — multi-turn chat; may issue a ticket
GET    /chat/history/{id}     — stored turns for a conductor, oldest first
DELETE /chat/history/{id}     — wipe a conductor's stored turns
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.config import settings
from app.database import get_db
from app.dependencies import get_assistant
from app.schemas.chat import QuestionRequest, ConversationRequest, ChatMessageOut
from app.schemas.ticket import TicketOut
from app.services.assistant import ChatAssistant
from app.services.chat_history_service import get_chat_history, clear_chat_history

router = APIRouter()


@router.post("/chat", summary="Ask the assistant a question")
def ask(body: QuestionRequest, assistant: ChatAssistant = Depends(get_assistant)):
    if not body.question or not body.question.strip():
        raise HTTPException(status_code=400, detail="Question is required")

    result = assistant.process_question(body.question)
    if not result["success"]:
        return JSONResponse(status_code=500, content=result)
    return result


@router.post("/chat/conversation", summary="Continue a conversation with the assistant")
def converse(body: ConversationRequest, assistant: ChatAssistant = Depends(get_assistant)):
    if not body.messages:
        raise HTTPException(status_code=400, detail="Messages array is required")

    result = assistant.process_conversation(body.messages, body.conductor_id, body.conductor_route)
    if not result["success"]:
        return JSONResponse(status_code=500, content=result)
    if result.get("ticket") is not None:
        result["ticket"] = TicketOut.model_validate(result["ticket"]).model_dump(mode="json")
    return result


@router.get("/chat/history/{conductor_id}", response_model=list[ChatMessageOut],
            summary="Stored chat turns for a conductor")
def history(conductor_id: int, limit: Optional[int] = None, db: Session = Depends(get_db)):
    return get_chat_history(db, conductor_id, limit or settings.CHAT_HISTORY_LIMIT)


@router.delete("/chat/history/{conductor_id}", summary="Clear a conductor's chat history")
def clear_history(conductor_id: int, db: Session = Depends(get_db)):
    clear_chat_history(db, conductor_id)
    return {"success": True}
