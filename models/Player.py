from models.errors import MissingPendingQuestion, PendingQuestionOccupied


class Player:
    def __init__(self, player_id, nickname):
        self.player_id = player_id
        self.nickname = nickname
        self.score = 0
        self.pending_question = None  # Question this player still has to answer

    def add_score(self, points):
        self.score += points

    def set_pending_question(self, question):
        if self.pending_question is not None:
            raise PendingQuestionOccupied(self.player_id)
        self.pending_question = question

    def take_pending_question(self):
        question = self.pending_question
        if question is None:
            raise MissingPendingQuestion(self.player_id)
        self.pending_question = None
        return question

    def __repr__(self):
        return f"Player({self.player_id}, {self.nickname!r}, score={self.score})"
