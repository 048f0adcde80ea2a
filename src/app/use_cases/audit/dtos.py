from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ActivityLogDTO(BaseModel):
    id: str
    tenant_id: str
    actor: Optional[str] = None
    action: str
    details: Dict[str, Any] = Field(default_factory=dict, description="Amounts are rendered as strings")
    created_at: datetime


class AuditTrailResponseDTO(BaseModel):
    """
    Audit trail of one payment, invoice or recharge

    Entries are oldest first. A deleted payment or invoice keeps its trail.
    """

    entity_type: str
    entity_id: str
    entries: List[ActivityLogDTO]
