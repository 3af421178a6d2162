from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional


class ChatTurn(BaseModel):
    role: str        # user | assistant
    content: str


class QuestionRequest(BaseModel):
    question: Optional[str] = None


class ConversationRequest(BaseModel):
    messages: Optional[list[ChatTurn]] = None
    conductor_id: Optional[int] = None
    conductor_route: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True


class ChatMessageOut(BaseModel):
    id: int
    conductor_id: int
    role: str
    content: str
    session_id: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True
