from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.image_storage import ImageStorage
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.get_post import GetPostUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers all post-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all post use cases.
        Use cases are created on-demand via factories.
        """
        for use_case in (CreatePostUseCase, ListPostsUseCase, GetPostUseCase, UpdatePostUseCase):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    post_repository=container.get(PostRepository),
                    user_repository=container.get(UserRepository),
                )
            )
        
        container.register_factory(
            DeletePostUseCase,
            lambda: DeletePostUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
                image_storage=container.get(ImageStorage),
            )
        )
