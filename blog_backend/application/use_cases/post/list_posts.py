from typing import Dict, Optional

from ....domain.constants import POSTS_PER_PAGE
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...auth_gate import Identity, require_authenticated
from ...dto.post_dto import PostListResponse, PostResponse
from ...dto.user_dto import UserResponse
from .creator import load_creator


class ListPostsUseCase:
    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self._post_repository = post_repository
        self._user_repository = user_repository

    async def execute(self, identity: Identity, page: Optional[int] = None) -> PostListResponse:
        require_authenticated(identity)
        if not page or page < 1:
            page = 1

        total, posts = await self._post_repository.list(
            skip=(page - 1) * POSTS_PER_PAGE,
            limit=POSTS_PER_PAGE,
        )

        creators: Dict[str, UserResponse] = {}
        items = []
        for post in posts:
            if post.creator_id not in creators:
                creators[post.creator_id] = await load_creator(self._user_repository, post)
            items.append(PostResponse.from_post(post, creators[post.creator_id]))

        return PostListResponse(message="Fetched posts successfully.", posts=items, total_posts=total)
