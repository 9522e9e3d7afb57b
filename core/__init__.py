"""
Core utilities and configuration for the notebook runner API.

This package provides foundational components used throughout the service:

Modules:
    config: Application configuration and environment variable management
    context: AppContext, the process-wide state handed to the FastAPI app
    database: Async engine and session factory construction
    exceptions: Error taxonomy, each class carrying its HTTP status
    logging: Logging configuration
    security: Password hashing and JWT signing
    timeutils: Human-relative time labels

Usage:
    from core.config import get_settings
    from core.context import AppContext
    from core.exceptions import NotFoundError, UpstreamError
    from core.logging import setup_logging

Example:
    settings = get_settings()
    setup_logging(settings)

    context = AppContext.from_settings(settings)
    async with context.session_maker() as session:
        # Perform database operations
        pass
    await context.close()
"""
