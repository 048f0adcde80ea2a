"""Audit trail use cases"""
from .get_audit_trail import GetAuditTrail, AUDITED_ENTITY_TYPES
from .dtos import ActivityLogDTO, AuditTrailResponseDTO

__all__ = [
    "GetAuditTrail",
    "AUDITED_ENTITY_TYPES",
    "ActivityLogDTO",
    "AuditTrailResponseDTO",
]
