from ....core.errors import NotFoundError
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository


async def load_user(user_repository: UserRepository, user_id: str) -> User:
    user = await user_repository.find_by_id(user_id)
    if user is None:
        raise NotFoundError("No user found!")
    return user
