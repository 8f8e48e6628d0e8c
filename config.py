import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
MIN_PLAYERS = 2
ROUND_COUNT = 3
CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"
