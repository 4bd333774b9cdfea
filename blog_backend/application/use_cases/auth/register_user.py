# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.errors import ConflictError
from ....core.security import hash_password
from ...validators import check_email, check_min_length, check_not_empty, first_failure
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user
        
        Args:
            request: Registration request with user details
            
        Returns:
            UserResponse with created user information
            
        Raises:
            ValidationError: If email, name or password is malformed
            ConflictError: If a user with this email already exists
        """
        first_failure(
            check_email(request.email),
            check_not_empty(request.name, "name"),
            check_not_empty(request.password, "password"),
            check_min_length(request.password, "password"),
        )
        
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ConflictError("User already exists!")
        
        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            email=request.email,
            hashed_password=hash_password(request.password),
        )
        saved_user = await self.user_repository.save(new_user)
        logger.info("Registered user %s", saved_user.id)
        
        return UserResponse.from_user(saved_user)
