"""
ScriptDesk - Main Application Entry Point

Intake chat for AI-assisted video scripts, with admin review.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting ScriptDesk in {settings.ENVIRONMENT} mode...")

    # Initialize database if needed
    if settings.is_local:
        from app.infrastructure.local.database import init_db

        await init_db()

    # Prompt is read once; later edits to the file need a restart
    from app.api.deps import get_system_prompt

    prompt = get_system_prompt()
    logger.info(f"System prompt loaded ({len(prompt)} chars)")

    yield

    # Shutdown
    logger.info("Shutting down ScriptDesk...")
    from app.infrastructure.local.database import dispose_db

    await dispose_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="ScriptDesk",
        description="AI-assisted video script intake and review",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    from app.api import chat, scripts

    app.include_router(chat.router, prefix="/api/chat", tags=["chat"])
    app.include_router(scripts.router, prefix="/api/scripts", tags=["scripts"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "version": "0.1.0"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
