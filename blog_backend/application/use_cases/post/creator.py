from ....core.errors import raise_error
from ....domain.models.post import Post
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


async def load_creator(user_repository: UserRepository, post: Post) -> UserResponse:
    """Resolve a post's creator; a dangling reference is reported as 404"""
    creator = await user_repository.find_by_id(post.creator_id)
    if creator is None:
        raise_error("Creator of this post no longer exists!", status_code=404, data={"postId": post.id})
    return UserResponse.from_user(creator)
