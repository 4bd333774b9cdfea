from typing import List

from pydantic import BaseModel

from ...domain.models.post import Post
from ...utils.datetime_utils import to_iso
from .user_dto import UserResponse


class PostInput(BaseModel):
    """DTO for post create / update requests"""
    title: str
    content: str
    image_url: str


class PostResponse(BaseModel):
    """DTO for a post with its creator resolved"""
    id: str
    title: str
    content: str
    image_url: str
    creator: UserResponse
    created_at: str
    updated_at: str

    @classmethod
    def from_post(cls, post: Post, creator: UserResponse) -> "PostResponse":
        return cls(
            id=post.id or "",
            title=post.title,
            content=post.content,
            image_url=post.image_url,
            creator=creator,
            created_at=to_iso(post.created_at) or "",
            updated_at=to_iso(post.updated_at) or "",
        )


class PostListResponse(BaseModel):
    """DTO for one page of posts"""
    message: str
    posts: List[PostResponse]
    total_posts: int
