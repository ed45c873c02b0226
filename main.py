import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import async_sessionmaker
from strawberry.fastapi import GraphQLRouter

from app.config import settings
from app.database import AsyncSessionLocal, engine, init_models
from app.graphql.context import GraphQLContext
from app.graphql.schema import build_schema
from app.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from app.services.repository import SessionFactory

logger = logging.getLogger(__name__)


def create_app(session_factory: SessionFactory | None = None) -> FastAPI:
    """Create the FastAPI application serving the GraphQL API."""
    setup_structured_logging(log_level=settings.log_level, json_format=settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        description="GraphQL API for users, blogs, posts and threaded comments",
        debug=settings.debug,
        version=settings.app_version,
    )

    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    factory = session_factory or AsyncSessionLocal
    # Debug table creation targets the engine behind the injected factory
    bind = factory.kw.get("bind") if isinstance(factory, async_sessionmaker) else None
    owns_engine = session_factory is None

    async def get_context() -> GraphQLContext:
        return GraphQLContext(session_factory=factory)

    schema = build_schema(introspection=settings.graphql_introspection)
    graphql_app = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.graphql_ide else None,
    )
    app.include_router(graphql_app, prefix=settings.graphql_path)

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"Starting {settings.app_name} in {settings.environment} mode")
        if settings.debug:
            await init_models(bind)
        logger.info(f"GraphQL endpoint mounted at {settings.graphql_path}")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down the application...")
        if owns_engine:
            await engine.dispose()

    @app.get("/", tags=["Root"])
    async def root():
        return {"message": f"Welcome to the {settings.app_name}", "graphql": settings.graphql_path}

    @app.get("/health", tags=["Root"])
    async def health():
        return {"status": "ok", "version": settings.app_version}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
