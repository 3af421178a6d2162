"""
FastAPI dependencies for the shared clients.
The Gemini client is built once per process; tests swap these out through
app.dependency_overrides.
"""

from functools import lru_cache
from fastapi import Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.services.assistant import ChatAssistant
from app.services.auth_service import PlaintextCredentialVerifier
from app.services.intent_classifier import KeywordIntentClassifier
from app.services.llm_client import GeminiClient


@lru_cache
def get_llm_client() -> GeminiClient:
    return GeminiClient.from_settings()


@lru_cache
def get_intent_classifier() -> KeywordIntentClassifier:
    return KeywordIntentClassifier()


@lru_cache
def get_credential_verifier() -> PlaintextCredentialVerifier:
    return PlaintextCredentialVerifier()


def get_assistant(db: Session = Depends(get_db),
                  llm: GeminiClient = Depends(get_llm_client),
                  classifier: KeywordIntentClassifier = Depends(get_intent_classifier)) -> ChatAssistant:
    return ChatAssistant(db, llm, classifier)
