from ....domain.repositories.user_repository import UserRepository
from ...auth_gate import Identity, require_authenticated
from .load_user import load_user


class GetStatusUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, identity: Identity) -> str:
        caller = require_authenticated(identity)
        user = await load_user(self.user_repository, caller.user_id)
        return user.status
