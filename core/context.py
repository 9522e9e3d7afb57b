"""
Application context: everything a request handler needs, built once per process
"""

from dataclasses import dataclass
from typing import Optional

import httpx
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from core.config import Settings
from core.database import build_engine, build_session_maker
from core.exceptions import ConfigurationError
from core.security import TokenSigner
from upstream.client import DatabricksClient
import logging

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """
    Explicitly constructed process state handed to the FastAPI app.

    Attributes:
        settings: Loaded configuration
        engine: Async SQLAlchemy engine (owns the connection pool)
        session_maker: Factory for per-request sessions
        upstream_transport: httpx transport for upstream calls; None uses the network
    """

    settings: Settings
    engine: AsyncEngine
    session_maker: async_sessionmaker
    upstream_transport: Optional[httpx.AsyncBaseTransport] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = build_engine(settings)
        return cls(settings=settings, engine=engine, session_maker=build_session_maker(engine))

    def upstream_client(self) -> DatabricksClient:
        """Raises ConfigurationError when the instance URL or token is missing"""
        missing = [
            name for name, value in (
                ("DATABRICKS_INSTANCE", self.settings.DATABRICKS_INSTANCE),
                ("DATABRICKS_TOKEN", self.settings.DATABRICKS_TOKEN),
            ) if not value
        ]
        if missing:
            raise ConfigurationError(
                "Missing required parameters or environment variables",
                context={"missing": missing}
            )

        return DatabricksClient(
            self.settings.DATABRICKS_INSTANCE,
            self.settings.DATABRICKS_TOKEN,
            transport=self.upstream_transport
        )

    def token_signer(self) -> TokenSigner:
        """Raises ConfigurationError when no signing secret is configured"""
        if not self.settings.JWT_SECRET:
            raise ConfigurationError(
                "Token signing secret is not configured",
                context={"missing": ["JWT_SECRET"]}
            )

        return TokenSigner(
            self.settings.JWT_SECRET,
            algorithm=self.settings.JWT_ALGORITHM,
            expires_minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    def check_configuration(self):
        """Log every missing required setting once, at startup"""
        missing = self.settings.missing_required_settings()
        if missing:
            logger.warning(
                f"Missing configuration: {', '.join(missing)}. "
                f"Requests that need these settings will fail until they are set."
            )
        else:
            logger.info("All required configuration present")

    async def close(self):
        await self.engine.dispose()
