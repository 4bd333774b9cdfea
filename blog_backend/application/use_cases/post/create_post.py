# Standard library imports
import logging

# Local application imports
from ....core.errors import AuthenticationError
from ....domain.models.post import Post
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...auth_gate import Identity, require_authenticated
from ...validators import check_min_length, first_failure
from ...dto.post_dto import PostInput, PostResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for publishing a new post as the authenticated user"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, identity: Identity, post_input: PostInput) -> PostResponse:
        caller = require_authenticated(identity)
        first_failure(
            check_min_length(post_input.title, "title"),
            check_min_length(post_input.content, "content"),
        )

        user = await self.user_repository.find_by_id(caller.user_id)
        if user is None:
            raise AuthenticationError("Invalid user.")

        post = await self.post_repository.create(
            Post(
                id=None,
                title=post_input.title,
                content=post_input.content,
                image_url=post_input.image_url,
                creator_id=user.id or "",
            )
        )
        await self.user_repository.add_post(user.id or "", post.id or "")
        user.posts.append(post.id or "")
        logger.info("User %s created post %s", user.id, post.id)

        return PostResponse.from_post(post, UserResponse.from_user(user))
