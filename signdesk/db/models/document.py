from sqlalchemy import Column, String, Integer, ForeignKey, Boolean, JSON, Enum
from sqlalchemy.orm import relationship

from signdesk.db.base import BaseModel
from signdesk.domains.documents.entities import DocumentVisibility, DocumentStatus


class Document(BaseModel):
    __tablename__ = "documents"

    title = Column(String(255), nullable=False)
    external_id = Column(String(255), nullable=True)
    visibility = Column(Enum(DocumentVisibility), nullable=False, default=DocumentVisibility.EVERYONE)
    status = Column(Enum(DocumentStatus), nullable=False, default=DocumentStatus.DRAFT)
    auth_options = Column(JSON, nullable=True)
    use_legacy_field_insertion = Column(Boolean, nullable=False, default=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="owned_documents")
    team = relationship("Team", back_populates="documents")
    audit_logs = relationship("DocumentAuditLog", back_populates="document")
