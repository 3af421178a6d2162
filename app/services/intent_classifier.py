"""
Intent classification for assistant turns.
The dispatcher only depends on the IntentClassifier protocol, so the keyword
matcher can be swapped for a model-backed classifier.
"""

from typing import Protocol

TICKET_GENERATION = "ticket-generation"
ANSWER_QUESTION = "answer-question"

TICKET_PHRASES = (
    "generate ticket",
    "create ticket",
    "book ticket",
    "new ticket",
    "issue ticket",
    "make ticket",
)


class IntentClassifier(Protocol):
    def classify(self, text: str) -> str:
        ...


class KeywordIntentClassifier:
    """Ticket generation iff the text contains one of the phrases (case-insensitive)."""

    def __init__(self, phrases=TICKET_PHRASES):
        self.phrases = tuple(p.lower() for p in phrases)

    def classify(self, text: str) -> str:
        lowered = (text or "").lower()
        if any(phrase in lowered for phrase in self.phrases):
            return TICKET_GENERATION
        return ANSWER_QUESTION
