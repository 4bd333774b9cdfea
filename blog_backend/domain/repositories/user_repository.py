from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Storage contract for blog authors and the IDs of the posts they wrote"""
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Look up an author by login email; None when nobody registered it"""
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Look up an author by ID; malformed IDs behave like unknown ones"""
    
    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Insert a user without an ID or overwrite name/email/password/status of
        an existing one. Returns the stored user with its ID set.
        
        Raises:
            ConflictError: If the email is already taken by another user
        """
    
    @abstractmethod
    async def add_post(self, user_id: str, post_id: str) -> None:
        """Append a post ID to the author's post list"""
    
    @abstractmethod
    async def remove_post(self, user_id: str, post_id: str) -> None:
        """Drop a post ID from the author's post list (no-op if absent)"""
