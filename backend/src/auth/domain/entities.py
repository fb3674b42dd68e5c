from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class User:
    email: str
    full_name: str
    password_hash: str
    id: UUID | None = field(default=None)
    created_at: datetime | None = field(default=None)
