from typing import Any, Optional, Dict
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, and_, or_

from signdesk.db.models.document import Document as DocumentModel
from signdesk.db.models.team import Organisation as OrganisationModel, Team as TeamModel, TeamMember as TeamMemberModel
from signdesk.domains.documents.entities import Document
from signdesk.domains.teams.entities import TeamContext, TEAM_DOCUMENT_VISIBILITY_MAP


class DocumentRepository:
    """Репозиторий для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_team_context(self, team_id: int, user_id: int) -> Optional[TeamContext]:
        """Команда, флаги ее организации и роль пользователя в ней"""
        result = await self.session.execute(
            select(TeamModel.id, TeamModel.organisation_id, OrganisationModel.claim_flags)
            .join(OrganisationModel, TeamModel.organisation_id == OrganisationModel.id)
            .where(TeamModel.id == team_id)
        )
        row = result.one_or_none()

        if row is None:
            return None

        role_result = await self.session.execute(
            select(TeamMemberModel.role).where(
                and_(
                    TeamMemberModel.team_id == team_id,
                    TeamMemberModel.user_id == user_id
                )
            )
        )

        return TeamContext(
            team_id=row.id,
            organisation_id=row.organisation_id,
            current_team_role=role_result.scalar_one_or_none(),
            organisation_flags=dict(row.claim_flags or {})
        )

    def document_where_clause(self, document_id: int, user_id: int, team: TeamContext):
        """Фильтр доступа: свои документы команды плюс документы с видимостью, доступной роли"""
        conditions = [
            and_(DocumentModel.user_id == user_id, DocumentModel.team_id == team.team_id)
        ]

        if team.current_team_role is not None:
            conditions.append(
                and_(
                    DocumentModel.team_id == team.team_id,
                    DocumentModel.visibility.in_(TEAM_DOCUMENT_VISIBILITY_MAP[team.current_team_role])
                )
            )

        return and_(DocumentModel.id == document_id, or_(*conditions))

    async def get_accessible(self, document_id: int, user_id: int, team: TeamContext) -> Optional[Document]:
        """Получение документа, если он виден пользователю"""
        result = await self.session.execute(
            select(DocumentModel).where(self.document_where_clause(document_id, user_id, team))
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def get_by_id(self, document_id: int) -> Optional[Document]:
        """Получение документа по id без проверки доступа"""
        result = await self.session.execute(
            select(DocumentModel)
            .where(DocumentModel.id == document_id)
            .execution_options(populate_existing=True)
        )
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def update_fields(self, document_id: int, values: Dict[str, Any]) -> Document:
        """Обновление полей документа в текущей транзакции, без commit"""
        await self.session.execute(
            update(DocumentModel)
            .where(DocumentModel.id == document_id)
            .values(**values)
        )
        return await self.get_by_id(document_id)

    def _to_domain(self, db_document: DocumentModel) -> Document:
        """Преобразование модели БД в доменную сущность"""
        return Document(
            id=db_document.id,
            user_id=db_document.user_id,
            team_id=db_document.team_id,
            title=db_document.title,
            external_id=db_document.external_id,
            visibility=db_document.visibility,
            status=db_document.status,
            auth_options=db_document.auth_options,
            use_legacy_field_insertion=db_document.use_legacy_field_insertion,
            created_at=db_document.created_at,
            updated_at=db_document.updated_at
        )
