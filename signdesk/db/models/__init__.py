from signdesk.db.models.user import User
from signdesk.db.models.team import Organisation, Team, TeamMember
from signdesk.db.models.document import Document
from signdesk.db.models.audit_log import DocumentAuditLog

__all__ = [
    "User",
    "Organisation",
    "Team",
    "TeamMember",
    "Document",
    "DocumentAuditLog"
]
