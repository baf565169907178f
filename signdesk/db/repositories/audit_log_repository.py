from typing import List, Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from signdesk.db.models.audit_log import DocumentAuditLog as DocumentAuditLogModel
from signdesk.domains.audit.entities import AuditLogEntry


class AuditLogRepository:
    """Журнал аудита документов: только добавление и чтение"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_many(self, entries: Sequence[AuditLogEntry]) -> None:
        """Добавление записей в текущую транзакцию сессии"""
        if not entries:
            return

        self.session.add_all([
            DocumentAuditLogModel(
                document_id=entry.document_id,
                type=entry.type,
                data=entry.data,
                user_id=entry.user_id,
                email=entry.email,
                name=entry.name,
                ip_address=entry.ip_address,
                user_agent=entry.user_agent
            )
            for entry in entries
        ])
        await self.session.flush()

    async def list_by_document(self, document_id: int) -> List[AuditLogEntry]:
        """Записи журнала документа от старых к новым"""
        result = await self.session.execute(
            select(DocumentAuditLogModel)
            .where(DocumentAuditLogModel.document_id == document_id)
            .order_by(DocumentAuditLogModel.id.asc())
        )
        return [self._to_domain(log) for log in result.scalars().all()]

    def _to_domain(self, db_log: DocumentAuditLogModel) -> AuditLogEntry:
        return AuditLogEntry(
            id=db_log.id,
            type=db_log.type,
            document_id=db_log.document_id,
            data=db_log.data,
            user_id=db_log.user_id,
            email=db_log.email,
            name=db_log.name,
            ip_address=db_log.ip_address,
            user_agent=db_log.user_agent,
            created_at=db_log.created_at
        )
