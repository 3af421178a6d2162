"""
Chat history table — append-only log of assistant conversations per conductor.
Rows are only ever inserted, or deleted in bulk by conductor.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from app.database import Base


class ChatMessage(Base):
    __tablename__ = "chat_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    conductor_id = Column(Integer, nullable=False, index=True)
    role = Column(String(20), nullable=False)        # user | assistant
    content = Column(Text, nullable=False)
    session_id = Column(String(50))                  # YYYY-MM-DD unless supplied
    created_at = Column(DateTime, nullable=False, index=True)

    def __repr__(self):
        return f"<ChatMessage {self.id} conductor={self.conductor_id} role={self.role}>"
