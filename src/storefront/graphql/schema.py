"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..logging import get_logger
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class SchemaValidationError(Exception):
    """Raised at startup when the GraphQL schema cannot be built or introspected."""


schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved lazy type references early so the server fails
    fast instead of erroring on the first request.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        message = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=message)
        raise SchemaValidationError(f"GraphQL schema validation failed: {message}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        message = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=message)
        raise SchemaValidationError(f"GraphQL introspection failed: {message}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    The catalog store is read from ``request.app.state.store`` so each
    application instance serves its own store.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        return build_context(request.app.state.store, request=request)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=graphiql,
        context_getter=get_context,
    )
