"""
Unit tests for auth use cases (Register, Login).
"""
import pytest

from blog_backend.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest
from blog_backend.application.use_cases.auth.login_user import LoginUserUseCase
from blog_backend.application.use_cases.auth.register_user import RegisterUserUseCase
from blog_backend.core.errors import AuthenticationError, ConflictError, ValidationError
from blog_backend.core.security import hash_password, verify_password
from blog_backend.domain.models.user import User


def _registration(**overrides):
    fields = {"email": "a@x.com", "password": "abcde", "name": "A"}
    fields.update(overrides)
    return UserRegistrationRequest(**fields)


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.save.side_effect = lambda user: User(
            id="usr-new",
            name=user.name,
            email=user.email,
            hashed_password=user.hashed_password,
        )

        result = await RegisterUserUseCase(mock_user_repo).execute(_registration())

        assert result.id == "usr-new"
        assert result.email == "a@x.com"
        assert result.status == "I am new!"
        assert result.posts == []
        saved = mock_user_repo.save.call_args.args[0]
        assert saved.id is None
        assert saved.hashed_password != "abcde"
        assert verify_password("abcde", saved.hashed_password)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, password", [("A", "abcde"), ("Someone else", "different-pass")])
    async def test_register_duplicate_email_is_conflict(self, mock_user_repo, alice, name, password):
        mock_user_repo.find_by_email.return_value = alice

        with pytest.raises(ConflictError) as exc_info:
            await RegisterUserUseCase(mock_user_repo).execute(
                _registration(email=alice.email, name=name, password=password)
            )

        assert exc_info.value.status_code == 403
        assert exc_info.value.message == "User already exists!"
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"email": "not-an-email"}, "E-Mail is invalid."),
            ({"name": "  "}, "name must not be empty"),
            ({"password": ""}, "password must not be empty"),
            ({"password": "abcd"}, "password must contain at least 5 characters"),
        ],
    )
    async def test_register_invalid_input(self, mock_user_repo, overrides, message):
        with pytest.raises(ValidationError) as exc_info:
            await RegisterUserUseCase(mock_user_repo).execute(_registration(**overrides))

        assert exc_info.value.status_code == 422
        assert exc_info.value.message == message
        mock_user_repo.find_by_email.assert_not_called()


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.fixture
    def registered(self):
        return User(
            id="usr-123",
            name="Test User",
            email="test@example.com",
            hashed_password=hash_password("validpass"),
        )

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, token_service, registered):
        mock_user_repo.find_by_email.return_value = registered

        result = await LoginUserUseCase(mock_user_repo, token_service).execute(
            UserLoginRequest(email="test@example.com", password="validpass")
        )

        assert result.user_id == "usr-123"
        claims = token_service.verify(result.token)
        assert claims.user_id == "usr-123"
        assert claims.email == "test@example.com"

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo, token_service):
        mock_user_repo.find_by_email.return_value = None

        with pytest.raises(AuthenticationError) as exc_info:
            await LoginUserUseCase(mock_user_repo, token_service).execute(
                UserLoginRequest(email="unknown@example.com", password="anypass")
            )
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "User not found."

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, token_service, registered):
        mock_user_repo.find_by_email.return_value = registered

        with pytest.raises(AuthenticationError) as exc_info:
            await LoginUserUseCase(mock_user_repo, token_service).execute(
                UserLoginRequest(email="test@example.com", password="wrongpassword")
            )
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Password is incorrect."

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email, password",
        [("nope", "validpass"), ("test@example.com", "abc")],
    )
    async def test_login_invalid_input(self, mock_user_repo, token_service, email, password):
        with pytest.raises(ValidationError):
            await LoginUserUseCase(mock_user_repo, token_service).execute(
                UserLoginRequest(email=email, password=password)
            )
        mock_user_repo.find_by_email.assert_not_called()
