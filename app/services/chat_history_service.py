"""
Chat history log.
Saving is best-effort: a failed write is logged and never fails the caller.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.models.chat_message import ChatMessage
from app.utils.logger import get_logger

logger = get_logger(__name__)


def save_chat_message(db: Session, conductor_id: int, role: str, content: str,
                      session_id: Optional[str] = None) -> Optional[ChatMessage]:
    now = datetime.utcnow()
    message = ChatMessage(
        conductor_id=conductor_id,
        role=role,
        content=content,
        session_id=session_id or now.date().isoformat(),
        created_at=now,
    )
    try:
        db.add(message)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning(f"Could not save {role} message for conductor {conductor_id}: {e}")
        return None
    return message


def get_chat_history(db: Session, conductor_id: int, limit: int = 50) -> list[ChatMessage]:
    return (
        db.query(ChatMessage)
        .filter(ChatMessage.conductor_id == conductor_id)
        .order_by(ChatMessage.created_at.asc(), ChatMessage.id.asc())
        .limit(limit)
        .all()
    )


def clear_chat_history(db: Session, conductor_id: int) -> int:
    removed = db.query(ChatMessage).filter(ChatMessage.conductor_id == conductor_id).delete()
    db.commit()
    logger.info(f"Cleared {removed} chat messages for conductor {conductor_id}")
    return removed
