"""
Field resolution for relational fields.

Every relational field on an object type is declared in
``app.models.relations``; this module turns a declaration plus a parent
object into at most one repository call. Lookups are independent per field
and per parent and never write.
"""

import logging
from typing import Any

from app.database import Base
from app.exceptions import InvariantViolationError
from app.graphql.context import GraphQLContext
from app.models.relations import Relation, get_relation

logger = logging.getLogger(__name__)


async def resolve_relation(context: GraphQLContext, source: type[Base], name: str, parent: Any) -> Any:
    """
    Resolve relation ``name`` of ``source`` for ``parent``.

    Returns a row (or None) for single relations and a list for many. A
    null local key short-circuits to None without touching the database.

    Raises:
        InvariantViolationError: a one-to-one inverse relation matched several rows
    """
    relation = get_relation(source, name)

    if relation.local_key is not None:
        key = getattr(parent, relation.local_key)
        if key is None:
            return None
        return await context.repository(relation.target).get_by_id(key)

    return await _resolve_remote(context, relation, parent.id)


async def resolve_relation_for_id(context: GraphQLContext, source: type[Base], name: str, parent_id: str) -> Any:
    """Resolve a remote-key relation when only the parent's id is known."""
    relation = get_relation(source, name)
    if relation.remote_key is None:
        raise ValueError(f"{source.__name__}.{name} is resolved through a local key and needs the parent row")
    return await _resolve_remote(context, relation, parent_id)


async def _resolve_remote(context: GraphQLContext, relation: Relation, parent_id: str) -> Any:
    rows = await context.repository(relation.target).find_many(**{relation.remote_key: parent_id})
    if relation.many:
        return rows
    if not rows:
        return None
    if len(rows) > 1:
        logger.error(f"{relation.source.__name__}.{relation.name} matched {len(rows)} rows for id={parent_id}")
        raise InvariantViolationError(
            f"{relation.source.__name__} '{parent_id}' has {len(rows)} {relation.target.__name__} rows, expected at most one",
            details={"relation": relation.name, "ids": [row.id for row in rows]},
        )
    return rows[0]
