from signdesk.domains.teams.entities import TeamMemberRole, TeamContext, TEAM_DOCUMENT_VISIBILITY_MAP

__all__ = ["TeamMemberRole", "TeamContext", "TEAM_DOCUMENT_VISIBILITY_MAP"]
