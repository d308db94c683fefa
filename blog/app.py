import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.core import settings
from blog.core.auth_service import AuthService
from blog.core.db import DataStore, seed_sample_data
from blog.core.logging_config import setup_logging
from blog.error_handlers import register_error_handlers

# Import routes
from blog.routes import auth, post, like, user

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[DataStore] = None,
    auth_service: Optional[AuthService] = None,
    seed: bool = settings.SEED_SAMPLE_DATA,
) -> FastAPI:
    """Build the application around a store owned by this app instance.

    Passing ``store`` lets callers (tests) share or pre-populate it; ``seed``
    only applies to a store created here.
    """
    setup_logging(settings.LOG_LEVEL)

    if store is None:
        store = DataStore()
        if seed:
            seed_sample_data(store)
            logger.info("Seeded in-memory store with sample data")

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.store = store
    app.state.auth_service = auth_service or AuthService(store)
    if app.state.auth_service.secret_key == settings.DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY is not set; tokens are signed with the public default key")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(auth.router)
    app.include_router(post.router)
    app.include_router(like.router)
    app.include_router(user.router)

    @app.get("/")
    async def root():
        return {"message": "Blog API"}

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
