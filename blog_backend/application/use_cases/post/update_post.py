# Standard library imports
import logging

# Local application imports
from ....core.errors import AuthorizationError, NotFoundError
from ....domain.constants import UNCHANGED_IMAGE_SENTINEL
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...auth_gate import Identity, require_authenticated
from ...validators import check_min_length, first_failure
from ...dto.post_dto import PostInput, PostResponse
from .creator import load_creator

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for editing a post; only its creator may do so"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, identity: Identity, post_id: str, post_input: PostInput) -> PostResponse:
        """
        Overwrite title and content of a post.

        The image is replaced too, unless the client sent the literal
        string "undefined" as imageUrl.

        Raises:
            AuthenticationError: If the caller is anonymous
            ValidationError: If title or content is too short
            NotFoundError: If the post does not exist
            AuthorizationError: If the caller did not create the post
        """
        caller = require_authenticated(identity)
        first_failure(
            check_min_length(post_input.title, "title"),
            check_min_length(post_input.content, "content"),
        )

        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("No post found!")
        if not post.is_created_by(caller.user_id):
            raise AuthorizationError("Not authorized!")

        post.title = post_input.title
        post.content = post_input.content
        if post_input.image_url != UNCHANGED_IMAGE_SENTINEL:
            post.image_url = post_input.image_url

        updated = await self.post_repository.update(post)
        logger.info("User %s updated post %s", caller.user_id, post_id)

        creator = await load_creator(self.user_repository, updated)
        return PostResponse.from_post(updated, creator)
