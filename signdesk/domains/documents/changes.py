from dataclasses import dataclass
from typing import Any, List, Sequence

from signdesk.core.errors import AppError, AppErrorCode
from signdesk.domains.audit.entities import DocumentAuditLogType
from signdesk.domains.documents.auth_options import ResolvedAuthOptions
from signdesk.domains.documents.entities import (
    Document, DocumentStatus, DocumentUpdateData, DocumentVisibility, is_set
)

TITLE_LOCKED = "You cannot update the title if the document has been sent"


@dataclass(frozen=True)
class FieldChange:
    """Одно фактическое изменение поля для журнала аудита"""
    type: DocumentAuditLogType
    from_value: Any
    to_value: Any

    def to_data(self) -> dict:
        return {"from": self.from_value, "to": self.to_value}


def sequences_equal(left: Sequence, right: Sequence) -> bool:
    """Поэлементное сравнение с учетом порядка: [A, B] и [B, A] различаются"""
    if len(left) != len(right):
        return False
    return all(a == b for a, b in zip(left, right))


def _values(methods: Sequence) -> List[str]:
    return [method.value for method in methods]


def detect_document_changes(
    document: Document,
    data: DocumentUpdateData,
    auth: ResolvedAuthOptions
) -> List[FieldChange]:
    """Список реальных изменений полей документа.

    Непереданное поле и значение, совпадающее с текущим, изменением не считаются.
    Смена заголовка у отправленного документа запрещена.
    """
    is_title_same = not is_set(data.title) or data.title == document.title
    is_external_id_same = not is_set(data.external_id) or data.external_id == document.external_id
    is_global_access_same = sequences_equal(
        auth.current.global_access_auth, auth.effective.global_access_auth
    )
    is_global_action_same = sequences_equal(
        auth.current.global_action_auth, auth.effective.global_action_auth
    )
    is_visibility_same = not is_set(data.visibility) or data.visibility == document.visibility

    if not is_title_same and document.status != DocumentStatus.DRAFT:
        raise AppError(AppErrorCode.INVALID_BODY, TITLE_LOCKED)

    changes = []

    if not is_title_same:
        changes.append(FieldChange(
            type=DocumentAuditLogType.DOCUMENT_TITLE_UPDATED,
            from_value=document.title,
            to_value=data.title or "",
        ))

    if not is_external_id_same:
        changes.append(FieldChange(
            type=DocumentAuditLogType.DOCUMENT_EXTERNAL_ID_UPDATED,
            from_value=document.external_id,
            to_value=data.external_id or "",
        ))

    if not is_global_access_same:
        changes.append(FieldChange(
            type=DocumentAuditLogType.DOCUMENT_GLOBAL_AUTH_ACCESS_UPDATED,
            from_value=_values(auth.current.global_access_auth),
            to_value=_values(auth.effective.global_access_auth),
        ))

    if not is_global_action_same:
        changes.append(FieldChange(
            type=DocumentAuditLogType.DOCUMENT_GLOBAL_AUTH_ACTION_UPDATED,
            from_value=_values(auth.current.global_action_auth),
            to_value=_values(auth.effective.global_action_auth),
        ))

    if not is_visibility_same:
        changes.append(FieldChange(
            type=DocumentAuditLogType.DOCUMENT_VISIBILITY_UPDATED,
            from_value=document.visibility.value,
            to_value=DocumentVisibility(data.visibility).value,
        ))

    return changes
