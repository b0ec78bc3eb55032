"""
Game Configuration
Centralized settings for the Scoundrel card game
"""
import os


class GameConfig:
    """Fixed Scoundrel ruleset"""

    MAX_HEALTH = 20

    # Room sizes
    ROOM_SIZE = 4
    REFILL_SIZE = 3

    # Forfeit (run away) cooldown, in rooms
    FORFEIT_COOLDOWN = 2
    NEVER_FORFEITED = -1


class StorageConfig:
    """Save slot storage configuration"""

    REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
    REDIS_PORT = int(os.getenv('REDIS_PORT', 6379))
    REDIS_PASSWORD = os.getenv('REDIS_PASSWORD', None)
    USE_REDIS = os.getenv('SCOUNDREL_USE_REDIS', '1') == '1'

    KEY_PREFIX = 'scoundrel:save:'
    DEFAULT_SLOT = 'default'
    SAVE_TTL_SECONDS = int(os.getenv('SCOUNDREL_SAVE_TTL', 30 * 24 * 3600))

    @staticmethod
    def key_for(slot):
        """Redis key holding the snapshot of a save slot"""
        return f"{StorageConfig.KEY_PREFIX}{slot}"


class AppConfig:
    """Flask application configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-scoundrel-secret-change-me')
