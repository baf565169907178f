from sqlalchemy import Column, String, Integer, ForeignKey, JSON, Enum
from sqlalchemy.orm import relationship

from signdesk.db.base import BaseModel
from signdesk.domains.audit.entities import DocumentAuditLogType


class DocumentAuditLog(BaseModel):
    """Журнал изменений документа: записи только добавляются"""
    __tablename__ = "document_audit_logs"

    document_id = Column(Integer, ForeignKey("documents.id"), nullable=False, index=True)
    type = Column(Enum(DocumentAuditLogType), nullable=False)
    data = Column(JSON, nullable=False)

    user_id = Column(Integer, nullable=True)
    email = Column(String(255), nullable=True)
    name = Column(String(255), nullable=True)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(String(500), nullable=True)

    # Relationships
    document = relationship("Document", back_populates="audit_logs")
