from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from src.backend.api.deps import get_credential_store
from src.backend.domain import errors
from src.backend.domain.models.user import SafeUser
from src.backend.security import require_user_listing
from src.backend.services.audit.service import AuditOutcome, audit_service
from src.backend.services.users.service import InMemoryCredentialStore


router = APIRouter(prefix="/auth", tags=["auth"])


class SignupRequest(BaseModel):
    # All fields are optional at the schema level so a missing patientId is
    # reported as a 400 by the store rather than a 422 by validation.
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    mobile: Optional[str] = None
    patient_id: Optional[str] = Field(default=None, alias="patientId")
    password: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    patient_id: Optional[str] = Field(default=None, alias="patientId")
    password: Optional[str] = None


@router.post("/signup", response_model=SafeUser)
async def signup(
    payload: SignupRequest,
    store: InMemoryCredentialStore = Depends(get_credential_store),
) -> SafeUser:
    try:
        user = store.register(
            patient_id=payload.patient_id,
            name=payload.name,
            mobile=payload.mobile,
            password=payload.password,
            role=payload.role,
        )
    except errors.ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    except errors.ConflictError as exc:
        audit_service.log_event(
            "signup",
            outcome=AuditOutcome.REJECTED,
            patient_id=payload.patient_id,
            reason="conflict",
        )
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.message)

    audit_service.log_event("signup", patient_id=user.patient_id, role=user.role)
    return user


@router.post("/login", response_model=SafeUser)
async def login(
    payload: LoginRequest,
    store: InMemoryCredentialStore = Depends(get_credential_store),
) -> SafeUser:
    try:
        user = store.login(patient_id=payload.patient_id, password=payload.password)
    except errors.ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    except errors.AuthenticationError as exc:
        audit_service.log_event("login", outcome=AuditOutcome.REJECTED, patient_id=payload.patient_id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.message)

    audit_service.log_event("login", patient_id=user.patient_id, role=user.role)
    return user


@router.get("/users", response_model=List[SafeUser])
async def list_users(
    caller: Optional[str] = Depends(require_user_listing),
    store: InMemoryCredentialStore = Depends(get_credential_store),
) -> List[SafeUser]:
    """Diagnostic listing of every stored profile. Not for production use."""

    users = store.list_users()
    audit_service.log_event("list_users", caller=caller, count=len(users))
    return users
