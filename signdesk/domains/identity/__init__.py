from signdesk.domains.identity.entities import User

__all__ = ["User"]
