import logging
import sys

from config import LOG_LEVEL
from core.game_manager import GameManager
from core.player_manager import PlayerManager
from core.terminal_client import InputClosedError, TerminalClient
from models.Game import Game
from models.errors import GameStateError


def run(client, game_manager=None):
    game = Game()
    PlayerManager.register_players(game, client)
    game_manager = game_manager or GameManager()
    return game_manager.play(game, client)


# -------------------------
# MAIN
# -------------------------
def main():
    logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr)
    client = TerminalClient()

    try:
        run(client)
    except InputClosedError as e:
        logging.critical(f"Input closed mid-game: {e}")
        sys.exit(f"Game aborted: {e}")
    except GameStateError as e:
        logging.critical("Game state is inconsistent", exc_info=True)
        sys.exit(f"Game aborted, internal error: {e}")


if __name__ == "__main__":
    main()
