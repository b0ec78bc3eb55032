import argparse

from config import StorageConfig
from controllers.cli_controller import CLIController
from scoundrel.manager import GameManager as MemoryGameManager
from scoundrel.manager_redis import GameManager as RedisGameManager
from utils import setup_logging

parser = argparse.ArgumentParser(description="Play Scoundrel in the terminal")
parser.add_argument("--slot", default=StorageConfig.DEFAULT_SLOT, help="save slot to resume")
args = parser.parse_args()

setup_logging("WARNING")

manager = RedisGameManager() if StorageConfig.USE_REDIS else MemoryGameManager()
engine = manager.get_game(args.slot)

cli = CLIController(engine, save=lambda e: manager.update_game(args.slot, e))
cli.run()
