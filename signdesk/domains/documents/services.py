import logging
from typing import Optional, List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from signdesk.core.db import transaction
from signdesk.core.errors import AppError, AppErrorCode
from signdesk.db.repositories.audit_log_repository import AuditLogRepository
from signdesk.db.repositories.document_repository import DocumentRepository
from signdesk.domains.audit.entities import AuditLogEntry, RequestMetadata, create_document_audit_log_data
from signdesk.domains.documents.auth_options import (
    create_document_auth_options, ensure_action_auth_allowed,
    extract_document_auth_methods, resolve_auth_options
)
from signdesk.domains.documents.changes import detect_document_changes
from signdesk.domains.documents.entities import ActorContext, Document, DocumentUpdateData, is_set
from signdesk.domains.documents.policy import evaluate_update_policy
from signdesk.domains.teams.entities import TeamContext

logger = logging.getLogger(__name__)

# Поля документа, которые пишутся как есть, если переданы в запросе
DIRECT_FIELDS = ("title", "external_id", "visibility", "use_legacy_field_insertion")


class DocumentService:
    """Сервис изменения документов с проверкой прав и журналом аудита"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)
        self.audit_log_repository = AuditLogRepository(session)

    async def get_document_with_context(
        self,
        user_id: int,
        team_id: int,
        document_id: int
    ) -> Tuple[Document, TeamContext, ActorContext]:
        """Загрузка документа с учетом прав доступа пользователя в команде"""
        team = await self.document_repository.get_team_context(team_id, user_id)

        if team is None:
            raise AppError(AppErrorCode.NOT_FOUND, "Team not found")

        document = await self.document_repository.get_accessible(document_id, user_id, team)

        if document is None:
            raise AppError(AppErrorCode.NOT_FOUND, "Document not found")

        actor = ActorContext(
            is_owner=document.is_owned_by(user_id),
            current_role=team.current_team_role
        )
        return document, team, actor

    async def update_document(
        self,
        user_id: int,
        team_id: int,
        document_id: int,
        data: Optional[DocumentUpdateData] = None,
        request_metadata: Optional[RequestMetadata] = None
    ) -> Document:
        """Частичное обновление документа.

        Проверяет права, вычисляет фактические изменения полей и сохраняет
        документ вместе с записями журнала аудита в одной транзакции.
        Если менять нечего, документ возвращается без записи в БД.
        """
        request_metadata = request_metadata or RequestMetadata()
        document, team, actor = await self.get_document_with_context(user_id, team_id, document_id)

        requested_visibility = data.visibility if data is not None and is_set(data.visibility) else None
        verdict = evaluate_update_policy(
            is_owner=actor.is_owner,
            role=actor.current_role,
            current_visibility=document.visibility,
            requested_visibility=requested_visibility
        )

        if not verdict.allowed:
            logger.warning(f"User {user_id} denied update of document {document_id}: {verdict.reason}")
            raise AppError(AppErrorCode.UNAUTHORIZED, verdict.reason)

        # Вызов без данных обычно идет цепочкой после обновления метаданных
        if data is None or data.is_empty():
            logger.debug(f"Empty update for document {document_id}, nothing to do")
            return document

        current_auth = extract_document_auth_methods(document.auth_options)
        auth = resolve_auth_options(
            current_access=current_auth.global_access_auth,
            current_action=current_auth.global_action_auth,
            requested_access=data.global_access_auth,
            requested_action=data.global_action_auth
        )
        ensure_action_auth_allowed(auth.effective.global_action_auth, team.cfr21_enabled)

        changes = detect_document_changes(document, data, auth)

        audit_logs: List[AuditLogEntry] = [
            create_document_audit_log_data(
                type=change.type,
                document_id=document.id,
                metadata=request_metadata,
                data=change.to_data()
            )
            for change in changes
        ]

        if not audit_logs and not is_set(data.use_legacy_field_insertion):
            logger.debug(f"No changes detected for document {document_id}")
            return document

        values = {
            field: getattr(data, field) for field in DIRECT_FIELDS if is_set(getattr(data, field))
        }
        values["auth_options"] = create_document_auth_options(
            global_access_auth=auth.effective.global_access_auth,
            global_action_auth=auth.effective.global_action_auth
        )

        try:
            async with transaction(self.session):
                updated_document = await self.document_repository.update_fields(document.id, values)
                await self.audit_log_repository.create_many(audit_logs)
        except SQLAlchemyError as e:
            logger.error(f"Failed to update document {document_id}: {e}")
            raise AppError(AppErrorCode.UNKNOWN_ERROR, "Failed to update document") from e

        logger.info(
            f"Document {document_id} updated by user {user_id} "
            f"({len(audit_logs)} audit log entries)"
        )
        return updated_document

    async def get_audit_logs(self, user_id: int, team_id: int, document_id: int) -> List[AuditLogEntry]:
        """Журнал аудита документа, видимого пользователю"""
        document, _, _ = await self.get_document_with_context(user_id, team_id, document_id)
        return await self.audit_log_repository.list_by_document(document.id)
