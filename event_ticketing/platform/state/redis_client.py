from typing import Optional

from redis.asyncio import ConnectionPool as AsyncConnectionPool, Redis as AsyncRedis
from redis.exceptions import RedisError

from event_ticketing.platform.config.core_setting import settings
from event_ticketing.platform.logging.loguru_io import Logger


class RedisClient:
    """
    Async Redis client with connection pool.

    Redis is optional: when REDIS_ENABLED is false or the server cannot be
    reached at startup, `is_available` stays False and callers fall back to
    their in-process alternative.

    Usage:
        await redis_client.initialize()  # In startup
        if redis_client.is_available:
            client = redis_client.get_client()
    """

    def __init__(self) -> None:
        self._client: Optional[AsyncRedis] = None

    @property
    def url(self) -> str:
        return f'redis://{settings.REDIS_HOST}:{settings.REDIS_PORT}/{settings.REDIS_DB}'

    async def initialize(self) -> Optional[AsyncRedis]:
        """Initialize connection pool (idempotent). Returns None when Redis is unavailable."""
        if self._client is not None:
            return self._client

        if not settings.REDIS_ENABLED:
            Logger.base.info('📭 [Redis] Disabled by settings, using in-memory fallback')
            return None

        pool = AsyncConnectionPool.from_url(
            self.url,
            password=settings.REDIS_PASSWORD or None,
            decode_responses=True,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
            socket_connect_timeout=settings.REDIS_SOCKET_CONNECT_TIMEOUT,
        )
        client = AsyncRedis.from_pool(pool)
        try:
            await client.ping()
        except (RedisError, OSError) as e:
            Logger.base.warning(f'⚠️ [Redis] Unreachable at {self.url}, using in-memory fallback | {e}')
            await client.aclose()
            return None

        Logger.base.info(f'✅ [Redis] Connected to {self.url}')
        self._client = client
        return client

    @property
    def is_available(self) -> bool:
        return self._client is not None

    def get_client(self) -> AsyncRedis:
        if self._client is None:
            raise RuntimeError(
                'Redis client not initialized. Call await redis_client.initialize() during startup.'
            )
        return self._client

    async def disconnect(self) -> None:
        """Close connection pool"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


# Global singleton
redis_client = RedisClient()
