from ....core.errors import NotFoundError
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...auth_gate import Identity, require_authenticated
from ...dto.post_dto import PostResponse
from .creator import load_creator


class GetPostUseCase:
    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self._post_repository = post_repository
        self._user_repository = user_repository

    async def execute(self, identity: Identity, post_id: str) -> PostResponse:
        require_authenticated(identity)

        post = await self._post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("No post found!")

        creator = await load_creator(self._user_repository, post)
        return PostResponse.from_post(post, creator)
