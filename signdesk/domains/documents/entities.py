import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, List, Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from signdesk.domains.teams.entities import TeamMemberRole


class DocumentVisibility(str, enum.Enum):
    EVERYONE = "EVERYONE"
    MANAGER_AND_ABOVE = "MANAGER_AND_ABOVE"
    ADMIN = "ADMIN"


class DocumentStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"


class DocumentAccessAuth(str, enum.Enum):
    ACCOUNT = "ACCOUNT"
    TWO_FACTOR_AUTH = "TWO_FACTOR_AUTH"


class DocumentActionAuth(str, enum.Enum):
    ACCOUNT = "ACCOUNT"
    PASSKEY = "PASSKEY"
    TWO_FACTOR_AUTH = "TWO_FACTOR_AUTH"
    PASSWORD = "PASSWORD"


class _Unset:
    """Маркер поля, которое не было передано в запросе"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def is_set(value: Any) -> bool:
    return value is not UNSET


@dataclass
class Document:
    """Сущность документа"""
    id: int
    user_id: int
    team_id: int
    title: str
    visibility: DocumentVisibility = DocumentVisibility.EVERYONE
    status: DocumentStatus = DocumentStatus.DRAFT
    external_id: Optional[str] = None
    auth_options: Optional[Dict[str, Any]] = None
    use_legacy_field_insertion: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id


@dataclass
class DocumentUpdateData:
    """Частичное обновление документа.

    Каждое поле либо UNSET (изменение не запрошено), либо значение.
    Явный None у external_id означает очистку поля.
    """
    title: Any = UNSET
    external_id: Any = UNSET
    visibility: Any = UNSET
    global_access_auth: Any = UNSET
    global_action_auth: Any = UNSET
    use_legacy_field_insertion: Any = UNSET

    def provided_fields(self) -> List[str]:
        return [name for name, value in vars(self).items() if is_set(value)]

    def is_empty(self) -> bool:
        return not self.provided_fields()


@dataclass
class ActorContext:
    """Кто меняет документ: владелец ли он и какая у него роль в команде"""
    is_owner: bool
    current_role: Optional["TeamMemberRole"] = None
