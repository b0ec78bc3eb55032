import redis

from config import StorageConfig
from scoundrel.manager import GameManager as MemoryGameManager
from utils import get_logger

logger = get_logger("scoundrel.manager_redis")


class GameManager(MemoryGameManager):
    """
    Redis-backed save slots for multi-worker deployments.
    Falls back to in-memory storage if Redis is unavailable (development).
    """

    def __init__(self, rng=None, client=None):
        super().__init__(rng=rng)
        self.ttl = StorageConfig.SAVE_TTL_SECONDS

        try:
            self.redis_client = client or redis.Redis(
                host=StorageConfig.REDIS_HOST,
                port=StorageConfig.REDIS_PORT,
                password=StorageConfig.REDIS_PASSWORD,
                decode_responses=True,
                socket_connect_timeout=2,
            )
            # Test connection
            self.redis_client.ping()
            self.use_redis = True
            logger.info("Connected to Redis at %s:%s", StorageConfig.REDIS_HOST, StorageConfig.REDIS_PORT)
        except redis.RedisError as e:
            logger.warning("Redis connection failed: %s. Using in-memory storage.", e)
            self.redis_client = None
            self.use_redis = False

    # -----------------------------
    # STORAGE PRIMITIVES
    # -----------------------------

    # Redis errors propagate; a failed read is never reported as a missing save.

    def _read(self, slot):
        if not self.use_redis:
            return super()._read(slot)
        return self.redis_client.get(StorageConfig.key_for(slot))

    def _write(self, slot, snapshot):
        if not self.use_redis:
            return super()._write(slot, snapshot)
        self.redis_client.setex(StorageConfig.key_for(slot), self.ttl, snapshot)

    def _remove(self, slot):
        if not self.use_redis:
            return super()._remove(slot)
        self.redis_client.delete(StorageConfig.key_for(slot))

    def _slots(self):
        if not self.use_redis:
            return super()._slots()
        prefix = StorageConfig.KEY_PREFIX
        return [key[len(prefix):] for key in self.redis_client.scan_iter(match=f"{prefix}*")]
