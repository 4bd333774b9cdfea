from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
)
from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)
from .user import (
    GetUserUseCase,
    GetStatusUseCase,
    UpdateStatusUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "GetUserUseCase",
    "GetStatusUseCase",
    "UpdateStatusUseCase",
]
