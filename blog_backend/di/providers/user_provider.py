from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.get_status import GetStatusUseCase
from ...application.use_cases.user.update_status import UpdateStatusUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User profile use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case in (GetUserUseCase, GetStatusUseCase, UpdateStatusUseCase):
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    user_repository=container.get(UserRepository)
                )
            )
