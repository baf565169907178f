from dataclasses import dataclass
from typing import Any, Optional, List, Dict

from signdesk.core.errors import AppError, AppErrorCode
from signdesk.domains.documents.entities import (
    DocumentAccessAuth, DocumentActionAuth, UNSET, is_set
)

ACTION_AUTH_PERMISSION_DENIED = "You do not have permission to set the action auth"


@dataclass(frozen=True)
class DocumentAuthOption:
    """Глобальные методы авторизации документа"""
    global_access_auth: List[DocumentAccessAuth]
    global_action_auth: List[DocumentActionAuth]


@dataclass(frozen=True)
class ResolvedAuthOptions:
    current: DocumentAuthOption
    effective: DocumentAuthOption


def extract_document_auth_methods(auth_options: Optional[Dict[str, Any]]) -> DocumentAuthOption:
    """Разбор сохраненных auth_options; отсутствующие списки считаются пустыми"""
    auth_options = auth_options or {}

    return DocumentAuthOption(
        global_access_auth=[
            DocumentAccessAuth(method) for method in auth_options.get("global_access_auth") or []
        ],
        global_action_auth=[
            DocumentActionAuth(method) for method in auth_options.get("global_action_auth") or []
        ],
    )


def create_document_auth_options(
    global_access_auth: List[DocumentAccessAuth],
    global_action_auth: List[DocumentActionAuth]
) -> Dict[str, Any]:
    """Кодирование обоих списков для хранения; списки всегда пишутся вместе"""
    return {
        "global_access_auth": [DocumentAccessAuth(method).value for method in global_access_auth],
        "global_action_auth": [DocumentActionAuth(method).value for method in global_action_auth],
    }


def resolve_auth_options(
    current_access: List[DocumentAccessAuth],
    current_action: List[DocumentActionAuth],
    requested_access: Any = UNSET,
    requested_action: Any = UNSET
) -> ResolvedAuthOptions:
    """Итоговые списки авторизации: непереданный список остается текущим, пустой очищает"""
    effective_access = (
        [DocumentAccessAuth(method) for method in requested_access]
        if is_set(requested_access) else list(current_access)
    )
    effective_action = (
        [DocumentActionAuth(method) for method in requested_action]
        if is_set(requested_action) else list(current_action)
    )

    return ResolvedAuthOptions(
        current=DocumentAuthOption(list(current_access), list(current_action)),
        effective=DocumentAuthOption(effective_access, effective_action),
    )


def ensure_action_auth_allowed(effective_action: List[DocumentActionAuth], cfr21_enabled: bool) -> None:
    # Проверяется итоговый список, даже если он не менялся
    if effective_action and not cfr21_enabled:
        raise AppError(AppErrorCode.UNAUTHORIZED, ACTION_AUTH_PERMISSION_DENIED)
