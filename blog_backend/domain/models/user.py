from dataclasses import dataclass, field
from typing import List, Optional

from ..constants import DEFAULT_USER_STATUS


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    hashed_password: str
    status: str = DEFAULT_USER_STATUS
    posts: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Business invariants"""
        if not self.hashed_password:
            raise ValueError("Password hash is required")
