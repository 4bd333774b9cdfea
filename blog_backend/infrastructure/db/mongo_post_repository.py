# Standard library imports
from typing import List, Optional, Sequence, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING, ReturnDocument

# Local application imports
from ...domain.repositories.post_repository import PostRepository
from ...domain.models.post import Post
from ...domain.constants import PostFields
from ...utils.datetime_utils import utc_now, ensure_utc
from .mongo_connection import get_post_collection, to_object_id


class MongoPostRepository(PostRepository):
    """MongoDB implementation of PostRepository"""

    def __init__(self, post_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.post_collection = post_collection if post_collection is not None else get_post_collection()

    async def create(self, post: Post) -> Post:
        if not post:
            raise ValueError("Post cannot be None")
        creator_id = to_object_id(post.creator_id)
        if creator_id is None:
            raise ValueError(f"Invalid creator ID format: {post.creator_id}")

        now = utc_now()
        doc = {
            PostFields.TITLE: post.title,
            PostFields.CONTENT: post.content,
            PostFields.IMAGE_URL: post.image_url,
            PostFields.CREATOR: creator_id,
            PostFields.CREATED_AT: now,
            PostFields.UPDATED_AT: now,
        }
        try:
            result = await self.post_collection.insert_one(doc)
        except Exception as e:
            raise RuntimeError(f"Error creating post: {str(e)}")

        doc[PostFields.MONGO_ID] = result.inserted_id
        return self._document_to_post(doc)

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        object_id = to_object_id(post_id) if post_id else None
        if object_id is None:
            return None

        try:
            doc = await self.post_collection.find_one({PostFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error finding post by ID: {str(e)}")
        if not doc:
            return None
        return self._document_to_post(doc)

    async def find_by_ids(self, post_ids: Sequence[str]) -> List[Post]:
        object_ids = [oid for oid in (to_object_id(pid) for pid in post_ids) if oid is not None]
        if not object_ids:
            return []

        by_id = {}
        async for doc in self.post_collection.find({PostFields.MONGO_ID: {"$in": object_ids}}):
            post = self._document_to_post(doc)
            by_id[post.id] = post
        return [by_id[pid] for pid in post_ids if pid in by_id]

    async def list(self, skip: int, limit: int) -> Tuple[int, List[Post]]:
        total = await self.post_collection.count_documents({})
        cursor = (
            self.post_collection.find({})
            .sort([(PostFields.CREATED_AT, DESCENDING), (PostFields.MONGO_ID, DESCENDING)])
            .skip(max(0, int(skip)))
            .limit(max(1, int(limit)))
        )

        items: List[Post] = []
        async for doc in cursor:
            items.append(self._document_to_post(doc))
        return total, items

    async def update(self, post: Post) -> Post:
        object_id = to_object_id(post.id) if post.id else None
        if object_id is None:
            raise ValueError(f"Invalid post ID format: {post.id}")

        try:
            doc = await self.post_collection.find_one_and_update(
                {PostFields.MONGO_ID: object_id},
                {
                    "$set": {
                        PostFields.TITLE: post.title,
                        PostFields.CONTENT: post.content,
                        PostFields.IMAGE_URL: post.image_url,
                        PostFields.UPDATED_AT: utc_now(),
                    }
                },
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise RuntimeError(f"Error updating post: {str(e)}")
        if doc is None:
            raise ValueError(f"Post with ID {post.id} not found")
        return self._document_to_post(doc)

    async def delete(self, post_id: str) -> bool:
        object_id = to_object_id(post_id) if post_id else None
        if object_id is None:
            return False

        try:
            result = await self.post_collection.delete_one({PostFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting post: {str(e)}")
        return result.deleted_count > 0

    def _document_to_post(self, doc: dict) -> Post:
        return Post(
            id=str(doc.get(PostFields.MONGO_ID)),
            title=doc.get(PostFields.TITLE) or "",
            content=doc.get(PostFields.CONTENT) or "",
            image_url=doc.get(PostFields.IMAGE_URL) or "",
            creator_id=str(doc.get(PostFields.CREATOR) or ""),
            created_at=ensure_utc(doc.get(PostFields.CREATED_AT)),
            updated_at=ensure_utc(doc.get(PostFields.UPDATED_AT)),
        )
