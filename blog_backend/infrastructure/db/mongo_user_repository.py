# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.errors import ConflictError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields, DEFAULT_USER_STATUS
from .mongo_connection import get_user_collection, to_object_id


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Email address to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        object_id = to_object_id(user_id) if user_id else None
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)
        
        The post list is not written here; it is maintained through
        add_post / remove_post so concurrent post creation cannot drop IDs.
        
        Args:
            user: User domain model to save
            
        Returns:
            Saved User domain model with ID set
        """
        if not user:
            raise ValueError("User cannot be None")
        
        user_dict = self._user_to_dict(user)
        try:
            if user.id:
                object_id = to_object_id(user.id)
                if object_id is None:
                    raise ValueError(f"Invalid user ID format: {user.id}")
                
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict}
                )
                if update_result.matched_count == 0:
                    raise ValueError(f"User with ID {user.id} not found")
                
                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
                if document is None:
                    raise RuntimeError(f"User {user.id} was updated but could not be retrieved")
            else:
                user_dict[UserFields.POSTS] = list(user.posts)
                result = await self.user_collection.insert_one(user_dict)
                
                document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
                if document is None:
                    raise RuntimeError("User was created but could not be retrieved")
        except DuplicateKeyError:
            raise ConflictError("User already exists!")
        except (ValueError, RuntimeError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving user: {str(e)}")
        
        return self._document_to_user(document)
    
    async def add_post(self, user_id: str, post_id: str) -> None:
        await self._update_posts(user_id, {"$push": {UserFields.POSTS: post_id}})
    
    async def remove_post(self, user_id: str, post_id: str) -> None:
        await self._update_posts(user_id, {"$pull": {UserFields.POSTS: post_id}})
    
    async def _update_posts(self, user_id: str, update: dict) -> None:
        object_id = to_object_id(user_id)
        if object_id is None:
            raise ValueError(f"Invalid user ID format: {user_id}")
        try:
            await self.user_collection.update_one({UserFields.MONGO_ID: object_id}, update)
        except Exception as e:
            raise RuntimeError(f"Error updating posts of user {user_id}: {str(e)}")
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            status=document.get(UserFields.STATUS) or DEFAULT_USER_STATUS,
            posts=[str(post_id) for post_id in document.get(UserFields.POSTS, [])],
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """
        Convert the scalar fields of a User domain model to a MongoDB document
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.STATUS: user.status,
        }
