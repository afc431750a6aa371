"""Admin API views."""

from loguru import logger

from app.container import container


async def clear_cache() -> dict:
    """Drop every cached upstream payload.

    Not authenticated: anyone who can reach the API can flush the cache.
    """
    removed = await container.store.flush_all()
    logger.warning("Cache flushed via unauthenticated admin call ({} entries)", removed)
    return {"message": "Cache cleared"}
