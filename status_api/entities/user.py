# status_api/entities/user.py
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    email: str
    first_name: str
    last_name: str
    age: int
    id: int = 0
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None
    is_active: bool = True
    is_system_account: bool = False


@dataclass
class UserPatch:
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    is_active: Optional[bool] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))
