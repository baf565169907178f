from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from signdesk.core.auth import get_current_user
from signdesk.core.db import get_db
from signdesk.core.errors import AppError
from signdesk.domains.audit.entities import AuditUser, RequestMetadata
from signdesk.domains.documents.schemas import (
    DocumentUpdateRequest, DocumentResponse, DocumentAuditLogResponse,
    DocumentAuditLogListResponse
)
from signdesk.domains.documents.services import DocumentService
from signdesk.domains.identity.entities import User

router = APIRouter(prefix="/teams/{team_id}/documents", tags=["documents"])


def extract_request_metadata(request: Request, user: User) -> RequestMetadata:
    """Сбор данных о происхождении запроса для журнала аудита"""
    return RequestMetadata(
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
        audit_user=AuditUser(id=user.id, email=user.email, name=user.name),
        source="app"
    )


def _to_http_error(error: AppError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)


@router.patch("/{document_id}", response_model=DocumentResponse)
async def update_document(
    team_id: int,
    document_id: int,
    update_data: DocumentUpdateRequest,
    request: Request,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Частичное обновление документа"""
    document_service = DocumentService(db)

    try:
        document = await document_service.update_document(
            user_id=current_user.id,
            team_id=team_id,
            document_id=document_id,
            data=update_data.to_update_data(),
            request_metadata=extract_request_metadata(request, current_user)
        )
    except AppError as e:
        raise _to_http_error(e)

    return DocumentResponse.model_validate(document)


@router.get("/{document_id}/audit-logs", response_model=DocumentAuditLogListResponse)
async def get_document_audit_logs(
    team_id: int,
    document_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Получение журнала аудита документа"""
    document_service = DocumentService(db)

    try:
        audit_logs = await document_service.get_audit_logs(current_user.id, team_id, document_id)
    except AppError as e:
        raise _to_http_error(e)

    return DocumentAuditLogListResponse(
        audit_logs=[DocumentAuditLogResponse.model_validate(log) for log in audit_logs],
        total=len(audit_logs)
    )
