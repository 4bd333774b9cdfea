from fastapi import APIRouter

from .context import BlogContext, get_context
from .errors import BlogGraphQLRouter
from .schema import schema


def create_graphql_router() -> APIRouter:
    """GraphQL endpoint with GraphiQL enabled; mount it under /graphql"""
    return BlogGraphQLRouter(schema, context_getter=get_context, graphql_ide="graphiql")


__all__ = ["BlogContext", "create_graphql_router", "get_context", "schema"]
