# Standard library imports
import logging

# Local application imports
from ....core.errors import AuthorizationError, NotFoundError
from ....domain.repositories.image_storage import ImageStorage
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...auth_gate import Identity, require_authenticated

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post together with its image and owner reference"""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        image_storage: ImageStorage,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.image_storage = image_storage

    async def execute(self, identity: Identity, post_id: str) -> bool:
        caller = require_authenticated(identity)

        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("No post found!")
        if not post.is_created_by(caller.user_id):
            raise AuthorizationError("Not authorized!")

        await self.image_storage.delete(post.image_url)
        await self.post_repository.delete(post_id)
        await self.user_repository.remove_post(post.creator_id, post_id)
        logger.info("User %s deleted post %s", caller.user_id, post_id)
        return True
