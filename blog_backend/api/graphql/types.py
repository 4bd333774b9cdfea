"""GraphQL object and input types."""

# Standard library imports
from typing import List, Optional

# External package imports
import strawberry
from strawberry.types import Info

# Local application imports
from ...application.dto.post_dto import PostInput, PostResponse
from ...application.dto.user_dto import UserResponse
from ...domain.repositories.post_repository import PostRepository
from .context import BlogContext


@strawberry.type
class User:
    id: strawberry.ID = strawberry.field(name="_id")
    name: str
    email: str
    status: str
    post_ids: strawberry.Private[List[str]]
    # Never populated; kept so clients querying it get null instead of an error
    password: Optional[str] = None

    @strawberry.field
    async def posts(self, info: Info[BlogContext, None]) -> Optional[List["Post"]]:
        repository = info.context.container.get(PostRepository)
        stored = await repository.find_by_ids(self.post_ids)
        creator = UserResponse(
            id=str(self.id),
            name=self.name,
            email=self.email,
            status=self.status,
            posts=list(self.post_ids),
        )
        return [Post.from_response(PostResponse.from_post(post, creator)) for post in stored]

    @classmethod
    def from_response(cls, user: UserResponse) -> "User":
        return cls(
            id=strawberry.ID(user.id),
            name=user.name,
            email=user.email,
            status=user.status,
            post_ids=list(user.posts),
        )


@strawberry.type
class Post:
    id: strawberry.ID = strawberry.field(name="_id")
    title: str
    content: str
    image_url: str
    creator: User
    created_at: str
    updated_at: str

    @classmethod
    def from_response(cls, post: PostResponse) -> "Post":
        return cls(
            id=strawberry.ID(post.id),
            title=post.title,
            content=post.content,
            image_url=post.image_url,
            creator=User.from_response(post.creator),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


@strawberry.type
class AuthData:
    token: str
    user_id: str


@strawberry.type
class PostData:
    message: str
    posts: Optional[List[Post]]
    total_posts: int


@strawberry.input
class UserInputData:
    email: str
    name: str
    password: str


@strawberry.input
class PostInputData:
    title: str
    content: str
    image_url: str

    def to_dto(self) -> PostInput:
        return PostInput(title=self.title, content=self.content, image_url=self.image_url)
