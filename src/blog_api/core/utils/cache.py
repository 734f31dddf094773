from collections.abc import AsyncGenerator

from redis.asyncio import ConnectionPool, Redis

pool: ConnectionPool | None = None
client: Redis | None = None


def create_redis_cache_pool(redis_url: str) -> None:
    global pool, client
    pool = ConnectionPool.from_url(redis_url)
    client = Redis.from_pool(pool)


async def close_redis_cache_pool() -> None:
    global pool, client
    if client is not None:
        await client.aclose()
    client = None
    pool = None


async def async_get_redis() -> AsyncGenerator[Redis, None]:
    """Yield the shared Redis client, building a pool lazily if the lifespan did not."""
    if client is None:
        from ..config import settings

        create_redis_cache_pool(settings.REDIS_CACHE_URL)
    assert client is not None
    yield client
