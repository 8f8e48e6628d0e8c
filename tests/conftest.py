import os
import sys
import pytest

# Ensure the project root (containing `core`, `models`, `utils`) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from core.terminal_client import InputClosedError
from models.Game import Game


class ScriptedClient:
    """Feeds canned lines to the game and records everything it shows."""

    def __init__(self, lines=()):
        self.lines = list(lines)
        self.messages = []
        self.prompts = []
        self.clears = 0

    def send_message(self, text):
        self.messages.append(text)

    def prompt(self, text):
        self.prompts.append(text)
        if not self.lines:
            raise InputClosedError("script exhausted")
        return self.lines.pop(0)

    def wait_for_enter(self, text):
        self.prompt(text)

    def clear_screen(self):
        self.clears += 1

    def output(self):
        return "\n".join(self.messages)


class FixedOrder:
    """Stand-in for random.Random whose shuffle always yields the given order."""

    def __init__(self, order):
        self.order = list(order)

    def shuffle(self, seq):
        seq[:] = self.order


@pytest.fixture()
def game():
    g = Game()
    for name in ("Joe", "Bob", "Fred"):
        g.add_player(name)
    return g
