from signdesk.domains.audit.entities import (
    DocumentAuditLogType, AuditUser, RequestMetadata, AuditLogEntry,
    create_document_audit_log_data
)

__all__ = [
    "DocumentAuditLogType", "AuditUser", "RequestMetadata", "AuditLogEntry",
    "create_document_audit_log_data"
]
