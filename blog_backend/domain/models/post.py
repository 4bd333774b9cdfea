from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Post:
    """Domain model for a blog Post"""

    id: Optional[str]
    title: str
    content: str
    image_url: str
    creator_id: str

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_created_by(self, user_id: str) -> bool:
        return self.creator_id == user_id
