"""
Conversational assistant.

Each turn is classified as ticket generation or a question:
  - ticket generation → TicketExtractor (Gemini extraction + ticket insert)
  - question          → Gemini chat seeded with the data context and prior turns
When a conductor id is given, the user turn and the reply are appended to
chat_history; failures there are logged by chat_history_service and ignored.

Public methods never raise. They return a dict with `success`; on failure it
carries `error` (generic) and `details` (the exception text).
"""

from typing import Optional
from sqlalchemy.orm import Session
from app.config import settings
from app.services import store
from app.services.chat_history_service import save_chat_message
from app.services.intent_classifier import IntentClassifier, KeywordIntentClassifier, TICKET_GENERATION
from app.services.llm_client import GeminiClient
from app.services.prompt_builder import CONVERSATION_ACK, build_conversation_context, build_question_prompt
from app.services.ticket_extractor import TicketExtractor
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _role_and_content(message) -> tuple[str, str]:
    if isinstance(message, dict):
        return message.get("role", "user"), message.get("content", "")
    return message.role, message.content


class ChatAssistant:
    def __init__(self, db: Session, llm: GeminiClient,
                 classifier: Optional[IntentClassifier] = None,
                 extractor: Optional[TicketExtractor] = None):
        self.db = db
        self.llm = llm
        self.classifier = classifier or KeywordIntentClassifier()
        self.extractor = extractor or TicketExtractor(db, llm)

    # ── Ticket generation ────────────────────────────────────────────────
    def generate_ticket_from_prompt(self, prompt: str, conductor_id: int,
                                    conductor_route: Optional[str] = None) -> dict:
        try:
            ticket, message = self.extractor.generate(prompt, conductor_id, conductor_route)
        except Exception as e:
            logger.error(f"Ticket generation failed for conductor {conductor_id}: {e}", exc_info=True)
            return {"success": False, "error": "Failed to generate ticket", "details": str(e)}
        return {"success": True, "ticket": ticket, "message": message}

    # ── One-shot question ────────────────────────────────────────────────
    def process_question(self, question: str) -> dict:
        try:
            context = store.fetch_context(self.db)
            prompt = build_question_prompt(context, question, settings.SAMPLE_TICKET_LIMIT)
            answer = self.llm.generate(prompt)
        except Exception as e:
            logger.error(f"Chat assistant error: {e}", exc_info=True)
            return {
                "success": False,
                "error": "Failed to process your question. Please try again.",
                "details": str(e),
            }
        return {
            "success": True,
            "answer": answer,
            "context": {
                "routesCount": len(context.routes),
                "ticketsCount": len(context.tickets),
                "conductorsCount": len(context.conductors),
            },
        }

    # ── Conversation ─────────────────────────────────────────────────────
    def process_conversation(self, messages: list, conductor_id: Optional[int] = None,
                             conductor_route: Optional[str] = None) -> dict:
        try:
            last_role, last_content = _role_and_content(messages[-1])
            intent = self.classifier.classify(last_content)

            if intent == TICKET_GENERATION and conductor_id:
                return self._generate_in_conversation(last_content, conductor_id, conductor_route)

            if conductor_id and last_role == "user":
                self._persist(conductor_id, "user", last_content)

            answer = self._answer(messages)

            if conductor_id:
                self._persist(conductor_id, "assistant", answer)
            return {"success": True, "answer": answer}
        except Exception as e:
            logger.error(f"Conversation error: {e}", exc_info=True)
            return {
                "success": False,
                "error": "Failed to process conversation. Please try again.",
                "details": str(e),
            }

    def _generate_in_conversation(self, text: str, conductor_id: int,
                                  conductor_route: Optional[str]) -> dict:
        result = self.generate_ticket_from_prompt(text, conductor_id, conductor_route)
        self._persist(conductor_id, "user", text)
        if not result["success"]:
            return {
                "success": False,
                "error": result["error"],
                "details": result["details"],
                "answer": f"❌ Failed to generate ticket: {result['details'] or result['error']}",
            }
        self._persist(conductor_id, "assistant", result["message"])
        return {
            "success": True,
            "answer": result["message"],
            "ticketGenerated": True,
            "ticket": result["ticket"],
        }

    def _answer(self, messages: list) -> str:
        context = store.fetch_context(self.db)
        history = [
            self.llm.user_turn(build_conversation_context(context)),
            self.llm.model_turn(CONVERSATION_ACK),
        ]
        for message in messages[:-1]:
            role, content = _role_and_content(message)
            history.append(self.llm.user_turn(content) if role == "user" else self.llm.model_turn(content))

        _, latest = _role_and_content(messages[-1])
        chat = self.llm.start_chat(history=history)
        return chat.send_message(latest)

    def _persist(self, conductor_id: int, role: str, content: str):
        save_chat_message(self.db, conductor_id, role, content)
