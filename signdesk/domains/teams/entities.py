import enum
from dataclasses import dataclass, field
from typing import Optional, Dict

from signdesk.domains.documents.entities import DocumentVisibility


class TeamMemberRole(str, enum.Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    MEMBER = "MEMBER"


# Какие уровни видимости документов доступны каждой роли в команде
TEAM_DOCUMENT_VISIBILITY_MAP = {
    TeamMemberRole.ADMIN: [
        DocumentVisibility.ADMIN,
        DocumentVisibility.MANAGER_AND_ABOVE,
        DocumentVisibility.EVERYONE,
    ],
    TeamMemberRole.MANAGER: [
        DocumentVisibility.MANAGER_AND_ABOVE,
        DocumentVisibility.EVERYONE,
    ],
    TeamMemberRole.MEMBER: [
        DocumentVisibility.EVERYONE,
    ],
}


@dataclass
class TeamContext:
    """Команда документа глазами текущего пользователя"""
    team_id: int
    organisation_id: int
    current_team_role: Optional[TeamMemberRole] = None
    organisation_flags: Dict[str, bool] = field(default_factory=dict)

    @property
    def cfr21_enabled(self) -> bool:
        return bool(self.organisation_flags.get("cfr21", False))
