# External package imports
from fastapi import Depends
from strawberry.fastapi import BaseContext

# Local application imports
from ...application.auth_gate import Identity
from ...di.base_container import BaseContainer
from ...di.container import get_container
from ..v1.dependencies import get_identity


class BlogContext(BaseContext):
    """Per-request GraphQL context: the caller's identity and the DI container"""

    def __init__(self, identity: Identity, container: BaseContainer) -> None:
        super().__init__()
        self.identity = identity
        self.container = container


async def get_context(identity: Identity = Depends(get_identity)) -> BlogContext:
    return BlogContext(identity=identity, container=get_container())
