import sys

from config import CLEAR_SCREEN


class InputClosedError(EOFError):
    """Standard input closed while the game was waiting for a player."""


class TerminalClient:
    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def send_message(self, text):
        print(text, file=self.stream, flush=True)

    def prompt(self, text):
        self.stream.write(text)
        self.stream.flush()
        try:
            return input()
        except EOFError:
            raise InputClosedError("Input stream closed while waiting for a reply") from None

    def wait_for_enter(self, text):
        self.prompt(text)

    def clear_screen(self):
        self.stream.write(CLEAR_SCREEN)
        self.stream.flush()
