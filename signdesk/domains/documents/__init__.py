from signdesk.domains.documents.entities import (
    Document, DocumentVisibility, DocumentStatus, DocumentAccessAuth,
    DocumentActionAuth, DocumentUpdateData, ActorContext, UNSET
)
from signdesk.domains.documents.schemas import (
    DocumentUpdateRequest, DocumentResponse, DocumentAuditLogResponse,
    DocumentAuditLogListResponse
)

__all__ = [
    "Document", "DocumentVisibility", "DocumentStatus", "DocumentAccessAuth",
    "DocumentActionAuth", "DocumentUpdateData", "ActorContext", "UNSET",
    "DocumentUpdateRequest", "DocumentResponse", "DocumentAuditLogResponse",
    "DocumentAuditLogListResponse"
]
