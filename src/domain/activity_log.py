"""Activity Log Domain Entity

Audit trail of administrative mutations (payment edits/deletes, invoice
deletes, recharge transitions).
"""

import json
from datetime import datetime
from typing import Optional, Dict, Any
from sqlmodel import Field, Column, Index
from sqlalchemy import String, Text
from src.domain.base import BaseModel, generate_uuid


class ActivityLog(BaseModel, table=True):
    """Activity Log - Who did what to which entity"""

    __tablename__ = "activity_logs"
    __table_args__ = (
        Index("ix_activity_logs_tenant_id", "tenant_id"),
        Index("ix_activity_logs_entity", "entity_type", "entity_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    actor: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    action: str = Field(sa_column=Column(String(100), nullable=False))
    entity_type: str = Field(sa_column=Column(String(50), nullable=False))
    entity_id: str = Field(sa_column=Column(String(36), nullable=False))
    details_json: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @classmethod
    def record(
        cls,
        tenant_id: str,
        action: str,
        entity_type: str,
        entity_id: str,
        actor: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ActivityLog":
        return cls(
            tenant_id=tenant_id,
            actor=actor,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            details_json=json.dumps(details, default=str) if details is not None else None,
        )

    @property
    def details(self) -> Dict[str, Any]:
        if not self.details_json:
            return {}
        return json.loads(self.details_json)
