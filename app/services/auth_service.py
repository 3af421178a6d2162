"""
Conductor login.
Passwords are compared through a CredentialVerifier so a hashing scheme can
replace the plaintext check without touching the /login contract.
"""

from typing import Optional, Protocol
from sqlalchemy.orm import Session
from app.models.conductor import Conductor
from app.services.store import get_conductor_by_username
from app.utils.logger import get_logger

logger = get_logger(__name__)


class CredentialVerifier(Protocol):
    def verify(self, conductor: Conductor, password: str) -> bool:
        ...


class PlaintextCredentialVerifier:
    """Stored passwords are plaintext; compare them literally."""

    def verify(self, conductor: Conductor, password: str) -> bool:
        return conductor.password is not None and conductor.password == password


def authenticate(db: Session, username: str, password: str,
                 verifier: CredentialVerifier) -> Optional[Conductor]:
    conductor = get_conductor_by_username(db, username)
    if not conductor or not verifier.verify(conductor, password):
        logger.warning(f"Failed login for username '{username}'")
        return None
    logger.info(f"Conductor {conductor.id} ({conductor.username}) logged in")
    return conductor
