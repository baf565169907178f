from pydantic import BaseModel, Field, field_validator, ConfigDict, ValidationInfo
from typing import Any, Optional, List, Dict
from datetime import datetime

from signdesk.domains.audit.entities import DocumentAuditLogType
from signdesk.domains.documents.entities import (
    DocumentVisibility, DocumentStatus, DocumentAccessAuth, DocumentActionAuth,
    DocumentUpdateData
)


class DocumentUpdateRequest(BaseModel):
    """Схема для частичного обновления документа.

    Учитываются только ключи, присутствующие в теле запроса.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    external_id: Optional[str] = Field(None, max_length=255)
    visibility: Optional[DocumentVisibility] = None
    global_access_auth: Optional[List[DocumentAccessAuth]] = None
    global_action_auth: Optional[List[DocumentActionAuth]] = None
    use_legacy_field_insertion: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if v is None:
            raise ValueError('Title cannot be null')
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip()

    @field_validator('visibility', 'global_access_auth', 'global_action_auth', 'use_legacy_field_insertion')
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        # null допустим только для external_id
        if v is None:
            raise ValueError(f'{info.field_name} cannot be null')
        return v

    def to_update_data(self) -> DocumentUpdateData:
        """Перевод в трехзначное представление: непереданные поля остаются UNSET"""
        return DocumentUpdateData(**{
            name: getattr(self, name) for name in self.model_fields_set
        })


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: int
    user_id: int
    team_id: int
    title: str
    external_id: Optional[str] = None
    visibility: DocumentVisibility
    status: DocumentStatus
    auth_options: Optional[Dict[str, Any]] = None
    use_legacy_field_insertion: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DocumentAuditLogResponse(BaseModel):
    """Схема записи журнала аудита"""
    id: int
    type: DocumentAuditLogType
    document_id: int
    data: Dict[str, Any]
    user_id: Optional[int] = None
    email: Optional[str] = None
    name: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DocumentAuditLogListResponse(BaseModel):
    audit_logs: List[DocumentAuditLogResponse]
    total: int
