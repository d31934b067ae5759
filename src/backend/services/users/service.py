from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, List, Optional

from src.backend.domain import errors
from src.backend.domain.models.user import SafeUser, User, UserRole

logger = logging.getLogger("users")


# Test accounts available from process start: (patient_id, name, mobile, password, role).
SEED_USERS = [
    ("patient1", "Alice Patient", "9990001111", "patient1", UserRole.PATIENT.value),
    ("patient2", "Bob Patient", "9990002222", "patient2", UserRole.PATIENT.value),
    ("caretaker1", "Carol Care", "9990003333", "caretaker1", UserRole.CARETAKER.value),
]


class InMemoryCredentialStore:
    """Process-lifetime user store keyed by patient id.

    Every read and write goes through a single lock, so a record is never
    observed half-written and a check-then-insert on registration is atomic.
    Passwords are kept and compared in plain text; this store is for local
    testing and demo flows only.
    """

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._lock = Lock()

    @classmethod
    def with_seed_users(cls) -> "InMemoryCredentialStore":
        store = cls()
        for patient_id, name, mobile, password, role in SEED_USERS:
            store._users[patient_id] = User(
                patient_id=patient_id,
                name=name,
                mobile=mobile,
                password=password,
                role=role,
            )
        return store

    def register(
        self,
        *,
        patient_id: Optional[str],
        name: Optional[str],
        mobile: Optional[str],
        password: Optional[str],
        role: Optional[str] = None,
    ) -> SafeUser:
        if not patient_id:
            raise errors.ValidationError("patientId required")

        user = User(
            patient_id=patient_id,
            name=name,
            mobile=mobile,
            password=password,
            role=role or UserRole.PATIENT.value,
        )
        with self._lock:
            if patient_id in self._users:
                raise errors.ConflictError("patientId already exists")
            self._users[patient_id] = user

        logger.debug("Registered user %s with role %s", patient_id, user.role)
        return user.to_safe()

    def login(self, *, patient_id: Optional[str], password: Optional[str]) -> SafeUser:
        if not patient_id:
            raise errors.ValidationError("patientId required")

        with self._lock:
            user = self._users.get(patient_id)

        # Unknown id and wrong password must look the same to the caller.
        if user is None or password is None or user.password != password:
            raise errors.AuthenticationError("invalid credentials")

        return user.to_safe()

    def get(self, patient_id: str) -> Optional[SafeUser]:
        with self._lock:
            user = self._users.get(patient_id)
        return user.to_safe() if user is not None else None

    def list_users(self) -> List[SafeUser]:
        with self._lock:
            users = list(self._users.values())
        return [user.to_safe() for user in users]

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
