class GameStateError(RuntimeError):
    """Raised when the game's bookkeeping no longer matches its own rules."""


class PlayerNotFound(GameStateError):
    def __init__(self, player_id):
        super().__init__(f"No player with id {player_id}")
        self.player_id = player_id


class MissingPendingQuestion(GameStateError):
    def __init__(self, player_id):
        super().__init__(f"Player {player_id} has no pending question")
        self.player_id = player_id


class PendingQuestionOccupied(GameStateError):
    def __init__(self, player_id):
        super().__init__(f"Player {player_id} already holds a pending question")
        self.player_id = player_id
