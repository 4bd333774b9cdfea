from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthDataResponse
from .user_dto import UserResponse
from .post_dto import PostInput, PostResponse, PostListResponse
from .image_dto import DeleteImageRequest

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthDataResponse",
    "UserResponse",
    "PostInput",
    "PostResponse",
    "PostListResponse",
    "DeleteImageRequest",
]
