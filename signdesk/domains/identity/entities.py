from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Сущность пользователя, от имени которого выполняются изменения"""
    id: int
    email: str
    name: Optional[str] = None
