from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field

logger = logging.getLogger("audit")


class AuditOutcome(str, Enum):
    SUCCESS = "success"
    REJECTED = "rejected"


class AuditEvent(BaseModel):
    """One account-related action.

    Only identifiers and outcomes go in here; request bodies (and so
    passwords) never do.
    """

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    action: str
    outcome: AuditOutcome
    patient_id: Optional[str] = None
    caller: Optional[str] = None
    details: Dict[str, Union[str, int]] = Field(default_factory=dict)


class AuditService:
    def log_event(
        self,
        action: str,
        *,
        outcome: AuditOutcome = AuditOutcome.SUCCESS,
        patient_id: Optional[str] = None,
        caller: Optional[str] = None,
        **details: Union[str, int],
    ) -> AuditEvent:
        """Write an event as one JSON line on the ``audit`` logger.

        Rejected actions are logged at WARNING so failed logins and duplicate
        signups stand out from normal traffic.
        """

        event = AuditEvent(
            action=action,
            outcome=outcome,
            patient_id=patient_id,
            caller=caller,
            details=details,
        )
        level = logging.WARNING if outcome == AuditOutcome.REJECTED else logging.INFO
        logger.log(level, event.model_dump_json())
        return event


audit_service = AuditService()
