from sqlalchemy import Column, String, Integer, ForeignKey, JSON, Enum, UniqueConstraint
from sqlalchemy.orm import relationship

from signdesk.db.base import BaseModel
from signdesk.domains.teams.entities import TeamMemberRole


class Organisation(BaseModel):
    __tablename__ = "organisations"

    name = Column(String(255), nullable=False)
    # Флаги тарифа организации, например {"cfr21": true}
    claim_flags = Column(JSON, nullable=False, default=dict)

    # Relationships
    teams = relationship("Team", back_populates="organisation", cascade="all, delete-orphan")


class Team(BaseModel):
    __tablename__ = "teams"

    name = Column(String(255), nullable=False)
    organisation_id = Column(Integer, ForeignKey("organisations.id"), nullable=False)

    # Relationships
    organisation = relationship("Organisation", back_populates="teams")
    members = relationship("TeamMember", back_populates="team", cascade="all, delete-orphan")
    documents = relationship("Document", back_populates="team")


class TeamMember(BaseModel):
    __tablename__ = "team_members"
    __table_args__ = (UniqueConstraint("team_id", "user_id"),)

    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    role = Column(Enum(TeamMemberRole), nullable=False, default=TeamMemberRole.MEMBER)

    # Relationships
    team = relationship("Team", back_populates="members")
    user = relationship("User", back_populates="memberships")
