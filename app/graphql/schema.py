"""
GraphQL schema assembly.

The schema is built once at startup by ``build_schema`` and handed to the
transport; nothing registers types into module-level state.
"""

import logging

import strawberry
from graphql import GraphQLError
from graphql.validation import NoSchemaIntrospectionCustomRule
from strawberry.extensions import AddValidationRules
from strawberry.types import ExecutionContext
from strawberry.utils.logging import StrawberryLogger

from app.exceptions import BlogAPIError
from app.graphql.extensions import OperationLoggingExtension
from app.graphql.mutations import Mutation
from app.graphql.queries import Query

logger = logging.getLogger(__name__)


class BlogSchema(strawberry.Schema):
    """Schema that logs domain errors quietly and everything else loudly."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, BlogAPIError):
                logger.warning(
                    f"{type(original).__name__}: {original.message}",
                    extra={
                        "status_code": original.status_code,
                        "error_code": original.error_code.value,
                        "path": ".".join(str(p) for p in error.path or []),
                        "details": original.details,
                    },
                )
            else:
                StrawberryLogger.error(error, execution_context)


def build_schema(introspection: bool = True) -> BlogSchema:
    """Assemble the Query and Mutation roots into one schema."""
    extensions = [OperationLoggingExtension]
    if not introspection:
        extensions.append(AddValidationRules([NoSchemaIntrospectionCustomRule]))
    return BlogSchema(query=Query, mutation=Mutation, extensions=extensions)
