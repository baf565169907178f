from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from signdesk.db.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"

    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=True)

    # Relationships
    owned_documents = relationship("Document", back_populates="owner")
    memberships = relationship("TeamMember", back_populates="user", cascade="all, delete-orphan")
