import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Dict


class DocumentAuditLogType(str, enum.Enum):
    DOCUMENT_TITLE_UPDATED = "DOCUMENT_TITLE_UPDATED"
    DOCUMENT_EXTERNAL_ID_UPDATED = "DOCUMENT_EXTERNAL_ID_UPDATED"
    DOCUMENT_GLOBAL_AUTH_ACCESS_UPDATED = "DOCUMENT_GLOBAL_AUTH_ACCESS_UPDATED"
    DOCUMENT_GLOBAL_AUTH_ACTION_UPDATED = "DOCUMENT_GLOBAL_AUTH_ACTION_UPDATED"
    DOCUMENT_VISIBILITY_UPDATED = "DOCUMENT_VISIBILITY_UPDATED"


@dataclass(frozen=True)
class AuditUser:
    id: Optional[int] = None
    email: Optional[str] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class RequestMetadata:
    """Откуда пришел запрос: копируется в каждую запись журнала"""
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    audit_user: Optional[AuditUser] = None
    source: str = "app"


@dataclass(frozen=True)
class AuditLogEntry:
    """Неизменяемая запись журнала аудита документа"""
    type: DocumentAuditLogType
    document_id: int
    data: Dict[str, Any]
    user_id: Optional[int] = None
    email: Optional[str] = None
    name: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = field(default=None, compare=False)


def create_document_audit_log_data(
    type: DocumentAuditLogType,
    document_id: int,
    metadata: RequestMetadata,
    data: Dict[str, Any]
) -> AuditLogEntry:
    """Сборка записи журнала с данными о пользователе и источнике запроса"""
    audit_user = metadata.audit_user or AuditUser()

    return AuditLogEntry(
        type=type,
        document_id=document_id,
        data=data,
        user_id=audit_user.id,
        email=audit_user.email,
        name=audit_user.name,
        ip_address=metadata.ip_address,
        user_agent=metadata.user_agent,
    )
