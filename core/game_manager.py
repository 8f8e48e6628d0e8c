import logging
import random

from config import ROUND_COUNT
from core.score_board import ScoreBoard
from models.Game import Game, RoundPhase
from models.Guess import Guess, GuessResult
from models.Question import Question
from utils.helpers import generate_player_pairs


class GameManager:
    def __init__(self, rng=None, round_count=ROUND_COUNT):
        self.rng = rng or random.Random()
        self.round_count = round_count

    # -------------------------
    # Game lifecycle
    # -------------------------
    def play(self, game: Game, client):
        """Run every round in order and show the final ranking."""
        score_board = ScoreBoard(game)
        for _ in range(self.round_count):
            self.play_round(game, client, score_board)

        self._enter(game, RoundPhase.FINISHED)
        ranking = score_board.final_ranking()
        client.clear_screen()
        client.send_message(score_board.render("🏆 Final Scores:"))
        return ranking

    def play_round(self, game: Game, client, score_board: ScoreBoard):
        game.round += 1
        self._enter(game, RoundPhase.ROUND_START)
        client.clear_screen()
        client.wait_for_enter(f"=> Press <ENTER> to start round {game.round}")

        self._enter(game, RoundPhase.PAIRING)
        pairs = generate_player_pairs(game.player_ids(), self.rng)
        logging.info(f"Generated pairing for {len(pairs)} players")

        self._enter(game, RoundPhase.QUESTIONING)
        self.pend_questions(game, client, pairs)
        client.wait_for_enter("=> Press <ENTER> to start answering")

        self._enter(game, RoundPhase.ANSWERING)
        answers = self.input_answers(game, client)
        client.wait_for_enter("=> Press <ENTER> to start guessing")

        self._enter(game, RoundPhase.GUESSING)
        results = self.do_guesses(game, client, answers, score_board)
        game.round_history.append(results)

        self._enter(game, RoundPhase.ROUND_END)
        client.clear_screen()
        client.send_message(score_board.render())
        return results

    def _enter(self, game: Game, phase):
        game.phase = phase
        logging.info(f"Round {game.round}: entering {phase.value}")

    def summon_player(self, game: Game, client, player_id):
        """Clear the shared screen so only the summoned player sees what follows."""
        client.clear_screen()
        player = game.get(player_id)
        client.wait_for_enter(f"=> {player.nickname}, press <ENTER>")

    # -------------------------
    # Questions & answers
    # -------------------------
    def pend_questions(self, game: Game, client, pairs):
        """Each player writes a question, which is handed to their responder."""
        for player_id in game.player_ids():
            self.summon_player(game, client, player_id)
            prompt = client.prompt("Enter a question: ")
            question = Question(player_id, prompt)
            game.set_pending_question(pairs[player_id], question)
            client.clear_screen()

    def input_answers(self, game: Game, client):
        answers = []
        for player_id in game.player_ids():
            self.summon_player(game, client, player_id)
            pending = game.take_pending_question(player_id)
            client.send_message(f"=> Answer this question:\n\t{pending.prompt}")
            response = client.prompt("Answer: ")
            answers.append(pending.respond(player_id, response))
        client.clear_screen()
        return answers

    # -------------------------
    # Guessing & scoring
    # -------------------------
    def do_guesses(self, game: Game, client, answers, score_board: ScoreBoard = None):
        score_board = score_board or ScoreBoard(game)
        results = []
        for answered in answers:
            client.clear_screen()
            client.send_message(f"=> Question:\n\t{answered.prompt}")
            client.send_message(f"=> Response:\n\t{answered.answer}\n")
            client.send_message(self._roster_text(game))

            guesses = []
            for player_id in game.player_ids():
                player = game.get(player_id)
                if player_id == answered.answered_by:
                    # The answerer still takes a turn so the order gives nothing away.
                    client.wait_for_enter(f"=> {player.nickname}, press <ENTER> to pass.")
                    continue
                client.send_message(
                    f"=> {player.nickname}, who do you think wrote this answer? Enter an ID from above."
                )
                guesses.append(Guess(player_id, self.read_guess(game, client, player_id)))

            client.wait_for_enter("=> Guessing done. Press <ENTER> to see the results.")
            result = GuessResult(answered, guesses)
            self.score_guesses(game, client, result, score_board)
            client.wait_for_enter("=> Press <ENTER> to continue.")
            results.append(result)
        return results

    def read_guess(self, game: Game, client, guesser_id):
        """Keep asking until the guesser names another registered player."""
        guesser = game.get(guesser_id)
        while True:
            text = client.prompt(f"{guesser.nickname}'s guess: ")
            try:
                guessed_id = int(text)
            except ValueError:
                client.send_message("=> You need to enter an ID from the list.")
                continue
            if not game.has_player(guessed_id):
                client.send_message("=> You need to enter an ID from the list.")
            elif guessed_id == guesser_id:
                client.send_message("=> You can't pick yourself. Enter another ID from the list.")
            else:
                return guessed_id

    def score_guesses(self, game: Game, client, result: GuessResult, score_board: ScoreBoard):
        """Reveal the answerer and give a point to everyone who found them."""
        answerer = game.get(result.answered_question.answered_by)
        client.send_message(f"=> **{answerer.nickname}** was the one who answered the question.")
        for guess in result.guesses:
            guesser = game.get(guess.guesser_id)
            if result.is_correct(guess):
                score_board.award(guess.guesser_id, 1)
                logging.info(f"Player {guess.guesser_id} guessed correctly")
                client.send_message(f"=> {guesser.nickname} was CORRECT")
            else:
                client.send_message(f"=> {guesser.nickname} was INCORRECT")

    def _roster_text(self, game: Game):
        lines = ["=> IDs:"]
        for player_id in game.player_ids():
            lines.append(f"{player_id:2}: {game.get(player_id).nickname}")
        return "\n".join(lines)
