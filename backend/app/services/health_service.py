"""
Database health reporting.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from app.database.connections import MongoConnectionProvider
from app.models.health import DatabaseState, ServiceStatus
from app.schemas.health import HealthResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one liveness probe. ``error`` is set when it failed."""
    ok: bool
    error: Optional[BaseException] = None


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with microseconds and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


class HealthService:
    """Pings the database and reports ok/degraded. Never raises."""

    def __init__(self, provider: MongoConnectionProvider):
        self.provider = provider

    async def probe(self) -> ProbeResult:
        """Acquire the database and run a ping, capturing any failure."""
        try:
            db = await self.provider.get_database()
            await db.command("ping")
        except Exception as e:
            logger.warning("Database ping failed: %s", e)
            return ProbeResult(ok=False, error=e)
        return ProbeResult(ok=True)

    async def check(self) -> HealthResponse:
        """Probe the database and build the ok or degraded response."""
        result = await self.probe()
        if result.ok:
            return HealthResponse(
                status=ServiceStatus.OK,
                database=DatabaseState.UP,
                timestamp=utc_timestamp(),
            )
        return HealthResponse(
            status=ServiceStatus.DEGRADED,
            database=DatabaseState.DOWN,
            timestamp=utc_timestamp(),
        )
