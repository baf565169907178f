from dataclasses import dataclass
from typing import Optional

from signdesk.domains.documents.entities import DocumentVisibility
from signdesk.domains.teams.entities import TeamMemberRole

VISIBILITY_PERMISSION_DENIED = "You do not have permission to update the document visibility"
UPDATE_PERMISSION_DENIED = "You do not have permission to update the document"

MANAGER_VISIBILITIES = (DocumentVisibility.EVERYONE, DocumentVisibility.MANAGER_AND_ABOVE)
MEMBER_VISIBILITIES = (DocumentVisibility.EVERYONE,)


@dataclass(frozen=True)
class PolicyVerdict:
    """Результат проверки прав: разрешено или запрещено с причиной"""
    allowed: bool
    reason: Optional[str] = None

    @classmethod
    def deny(cls, reason: str) -> "PolicyVerdict":
        return cls(allowed=False, reason=reason)


ALLOW = PolicyVerdict(allowed=True)


def _within(allowed_visibilities, current_visibility, requested_visibility) -> bool:
    if current_visibility not in allowed_visibilities:
        return False
    return requested_visibility is None or requested_visibility in allowed_visibilities


def evaluate_update_policy(
    is_owner: bool,
    role: Optional[TeamMemberRole],
    current_visibility: DocumentVisibility,
    requested_visibility: Optional[DocumentVisibility] = None
) -> PolicyVerdict:
    """Может ли пользователь изменить документ.

    Владелец может всегда. Остальные ограничены ролью в команде, причем
    текущая видимость документа проверяется даже если ее не меняют.
    """
    if is_owner:
        return ALLOW

    if role == TeamMemberRole.ADMIN:
        return ALLOW

    if role == TeamMemberRole.MANAGER:
        if _within(MANAGER_VISIBILITIES, current_visibility, requested_visibility):
            return ALLOW
        return PolicyVerdict.deny(VISIBILITY_PERMISSION_DENIED)

    if role == TeamMemberRole.MEMBER:
        if _within(MEMBER_VISIBILITIES, current_visibility, requested_visibility):
            return ALLOW
        return PolicyVerdict.deny(VISIBILITY_PERMISSION_DENIED)

    # Нет членства в команде или неизвестная роль
    return PolicyVerdict.deny(UPDATE_PERMISSION_DENIED)
