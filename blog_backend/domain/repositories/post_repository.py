from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post, assigning ID and timestamps"""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[str]) -> List[Post]:
        """Find posts by IDs, preserving the order of post_ids"""
        pass

    @abstractmethod
    async def list(self, skip: int, limit: int) -> Tuple[int, List[Post]]:
        """List posts newest first, returning (total, items)"""
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """Persist title, content and image of an existing post"""
        pass

    @abstractmethod
    async def delete(self, post_id: str) -> bool:
        """Delete a post, returning whether it existed"""
        pass
