"""GraphQL root types: every field delegates to one use case."""

# Standard library imports
from typing import Optional

# External package imports
import strawberry
from strawberry.types import Info

# Local application imports
from ...application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase
from ...application.use_cases.post.get_post import GetPostUseCase
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.user.get_status import GetStatusUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_status import UpdateStatusUseCase
from .context import BlogContext
from .errors import BlogSchema
from .types import AuthData, Post, PostData, PostInputData, User, UserInputData

BlogInfo = Info[BlogContext, None]


@strawberry.type(name="RootQuery")
class Query:
    @strawberry.field
    async def login(self, info: BlogInfo, email: str, password: str) -> Optional[AuthData]:
        use_case = info.context.container.get(LoginUserUseCase)
        auth = await use_case.execute(UserLoginRequest(email=email, password=password))
        return AuthData(token=auth.token, user_id=auth.user_id)

    @strawberry.field
    async def posts(self, info: BlogInfo, page: Optional[int] = 1) -> Optional[PostData]:
        use_case = info.context.container.get(ListPostsUseCase)
        result = await use_case.execute(info.context.identity, page)
        return PostData(
            message=result.message,
            posts=[Post.from_response(post) for post in result.posts],
            total_posts=result.total_posts,
        )

    @strawberry.field
    async def post(self, info: BlogInfo, post_id: strawberry.ID) -> Post:
        use_case = info.context.container.get(GetPostUseCase)
        return Post.from_response(await use_case.execute(info.context.identity, str(post_id)))

    @strawberry.field
    async def user(self, info: BlogInfo) -> User:
        use_case = info.context.container.get(GetUserUseCase)
        return User.from_response(await use_case.execute(info.context.identity))

    @strawberry.field
    async def status(self, info: BlogInfo) -> str:
        use_case = info.context.container.get(GetStatusUseCase)
        return await use_case.execute(info.context.identity)


@strawberry.type(name="RootMutation")
class Mutation:
    @strawberry.mutation
    async def create_user(self, info: BlogInfo, user_input: UserInputData) -> User:
        use_case = info.context.container.get(RegisterUserUseCase)
        created = await use_case.execute(
            UserRegistrationRequest(
                email=user_input.email,
                name=user_input.name,
                password=user_input.password,
            )
        )
        return User.from_response(created)

    @strawberry.mutation
    async def create_post(self, info: BlogInfo, post_input: PostInputData) -> Post:
        use_case = info.context.container.get(CreatePostUseCase)
        return Post.from_response(await use_case.execute(info.context.identity, post_input.to_dto()))

    @strawberry.mutation
    async def update_post(self, info: BlogInfo, post_id: strawberry.ID, post_input: PostInputData) -> Post:
        use_case = info.context.container.get(UpdatePostUseCase)
        updated = await use_case.execute(info.context.identity, str(post_id), post_input.to_dto())
        return Post.from_response(updated)

    @strawberry.mutation
    async def delete_post(self, info: BlogInfo, post_id: strawberry.ID) -> bool:
        use_case = info.context.container.get(DeletePostUseCase)
        return await use_case.execute(info.context.identity, str(post_id))

    @strawberry.mutation
    async def update_status(self, info: BlogInfo, status_input: str) -> str:
        use_case = info.context.container.get(UpdateStatusUseCase)
        return await use_case.execute(info.context.identity, status_input)


schema = BlogSchema(query=Query, mutation=Mutation)
