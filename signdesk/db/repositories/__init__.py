from signdesk.db.repositories.user_repository import UserRepository
from signdesk.db.repositories.document_repository import DocumentRepository
from signdesk.db.repositories.audit_log_repository import AuditLogRepository

__all__ = [
    "UserRepository",
    "DocumentRepository",
    "AuditLogRepository"
]
