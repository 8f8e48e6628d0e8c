class Guess:
    def __init__(self, guesser_id, guessed_id):
        self.guesser_id = guesser_id
        self.guessed_id = guessed_id


class GuessResult:
    """Guesses collected for one answered question."""

    def __init__(self, answered_question, guesses):
        self.answered_question = answered_question
        self.guesses = guesses

    def is_correct(self, guess):
        return guess.guessed_id == self.answered_question.answered_by

    @property
    def correct_guessers(self):
        return [g.guesser_id for g in self.guesses if self.is_correct(g)]
