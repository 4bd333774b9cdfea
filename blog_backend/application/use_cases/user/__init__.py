from .get_user import GetUserUseCase
from .get_status import GetStatusUseCase
from .update_status import UpdateStatusUseCase

__all__ = [
    "GetUserUseCase",
    "GetStatusUseCase",
    "UpdateStatusUseCase",
]
