"""GraphQL context: carries the session factory into resolvers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

from app.services.repository import Repository

if TYPE_CHECKING:
    from app.database import Base
    from app.services.repository import SessionFactory


class GraphQLContext(BaseContext):
    """Context passed to every GraphQL resolver."""

    def __init__(self, session_factory: SessionFactory) -> None:
        super().__init__()
        self.session_factory = session_factory

    def repository(self, model: type[Base]) -> Repository:
        """Repository for ``model`` bound to this request's session factory."""
        return Repository(self.session_factory, model)
