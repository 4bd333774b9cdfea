# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...auth_gate import Identity, require_authenticated
from ...validators import check_not_empty, first_failure
from .load_user import load_user

logger = logging.getLogger(__name__)


class UpdateStatusUseCase:
    """Use case for overwriting the authenticated user's status"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, identity: Identity, status: str) -> str:
        """
        Set the caller's status

        Returns:
            The stored status
        """
        caller = require_authenticated(identity)
        first_failure(check_not_empty(status, "status"))

        user = await load_user(self.user_repository, caller.user_id)
        user.status = status
        saved = await self.user_repository.save(user)
        logger.info("User %s updated status", caller.user_id)
        return saved.status
