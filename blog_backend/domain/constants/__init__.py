"""Constants for domain model field names"""

from .user_fields import UserFields, DEFAULT_USER_STATUS
from .post_fields import PostFields, UNCHANGED_IMAGE_SENTINEL, POSTS_PER_PAGE

__all__ = [
    "UserFields",
    "PostFields",
    "DEFAULT_USER_STATUS",
    "UNCHANGED_IMAGE_SENTINEL",
    "POSTS_PER_PAGE",
]
