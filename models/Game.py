from enum import Enum

from models.Player import Player
from models.errors import PlayerNotFound


class RoundPhase(Enum):
    LOBBY = "lobby"
    ROUND_START = "round_start"
    PAIRING = "pairing"
    QUESTIONING = "questioning"
    ANSWERING = "answering"
    GUESSING = "guessing"
    ROUND_END = "round_end"
    FINISHED = "finished"


class Game:
    def __init__(self):
        self.next_player_id = 0
        self.players = {}  # {player_id: Player}
        self.round = 0
        self.phase = RoundPhase.LOBBY
        self.round_history = []  # [[GuessResult, ...] per round]

    def add_player(self, nickname):
        player_id = self.next_player_id
        self.next_player_id += 1
        self.players[player_id] = Player(player_id, nickname)
        return player_id

    def player_ids(self):
        return sorted(self.players.keys())

    def get(self, player_id) -> Player:
        try:
            return self.players[player_id]
        except KeyError:
            raise PlayerNotFound(player_id) from None

    def has_player(self, player_id):
        return player_id in self.players

    def set_pending_question(self, player_id, question):
        self.get(player_id).set_pending_question(question)

    def take_pending_question(self, player_id):
        return self.get(player_id).take_pending_question()

    def add_score(self, player_id, points):
        self.get(player_id).add_score(points)
