import logging

from config import MIN_PLAYERS
from models.Game import Game


class PlayerManager:
    @staticmethod
    def add_player(game: Game, nickname):
        nickname = nickname.strip()
        if not nickname:
            return None
        player_id = game.add_player(nickname)
        logging.info(f"Registered player {player_id} ({nickname})")
        return player_id

    @staticmethod
    def register_players(game: Game, client, min_players=MIN_PLAYERS):
        """Ask for names until an empty line, once enough players have joined."""
        client.send_message("🕹 New game! Enter one name per player, then an empty line to start.")
        while True:
            name = client.prompt(f"Player {len(game.players) + 1} name: ")
            if PlayerManager.add_player(game, name) is not None:
                continue
            if len(game.players) >= min_players:
                break
            client.send_message("Need at least two players to start.")

        player_names = ", ".join(game.get(pid).nickname for pid in game.player_ids())
        client.send_message(f"🎬 Game starting with {len(game.players)} players: {player_names}")
        return game.player_ids()
