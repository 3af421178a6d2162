"""Conductor login."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_credential_verifier
from app.schemas.conductor import LoginRequest, ConductorProfile
from app.services.auth_service import CredentialVerifier, authenticate

router = APIRouter()


@router.post("/login", response_model=ConductorProfile, summary="Conductor login")
def login(body: LoginRequest, db: Session = Depends(get_db),
          verifier: CredentialVerifier = Depends(get_credential_verifier)):
    conductor = authenticate(db, body.username, body.password, verifier)
    if not conductor:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return conductor
