from models.Game import Game


class ScoreBoard:
    def __init__(self, game: Game):
        self.game = game

    def award(self, player_id, points):
        if not isinstance(points, int) or points < 0:
            raise ValueError(f"Points must be a non-negative integer, got {points!r}")
        self.game.add_score(player_id, points)

    def final_ranking(self):
        """(nickname, score) pairs, best first. Ties keep registration order."""
        players = [self.game.get(pid) for pid in self.game.player_ids()]
        ranked = sorted(players, key=lambda p: p.score, reverse=True)
        return [(p.nickname, p.score) for p in ranked]

    def render(self, title="🏆 Current Scores:"):
        scoreboard = title + "\n"
        for nickname, score in self.final_ranking():
            scoreboard += f"{nickname}: {score}\n"
        return scoreboard
