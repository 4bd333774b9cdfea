"""
GraphQL error formatting.

Errors raised by resolvers are emitted as `{message, status, data}` (plus
locations/path). Errors GraphQL produced itself, such as syntax errors or
unknown fields, keep the default shape.
"""

# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
import strawberry
from fastapi import Request
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse, process_result
from strawberry.types import ExecutionContext, ExecutionResult
from strawberry.utils.logging import StrawberryLogger

# Local application imports
from ...core.errors import BlogError, DEFAULT_ERROR_MESSAGE

logger = logging.getLogger(__name__)


def format_graphql_error(error: GraphQLError) -> Dict[str, Any]:
    original = error.original_error
    if original is None:
        return error.formatted

    formatted: Dict[str, Any] = {
        "message": error.message or DEFAULT_ERROR_MESSAGE,
        "status": getattr(original, "status_code", None) or 500,
        "data": getattr(original, "data", None),
    }
    if error.locations:
        formatted["locations"] = [location.formatted for location in error.locations]
    if error.path:
        formatted["path"] = error.path
    return formatted


class BlogSchema(strawberry.Schema):
    """Schema that logs domain errors quietly and everything else with a traceback"""

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        for error in errors:
            if isinstance(error.original_error, BlogError):
                logger.info("GraphQL request failed: %s (%s)", error.message, error.original_error.status_code)
            else:
                StrawberryLogger.error(error, execution_context)


class BlogGraphQLRouter(GraphQLRouter):
    async def process_result(self, request: Request, result: ExecutionResult) -> GraphQLHTTPResponse:
        response = process_result(result)
        if result.errors:
            response["errors"] = [format_graphql_error(error) for error in result.errors]
        return response
