from .user_repository import UserRepository
from .post_repository import PostRepository
from .image_storage import ImageStorage

__all__ = ["UserRepository", "PostRepository", "ImageStorage"]
