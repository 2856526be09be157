"""
Runtime settings, read from the environment (and a .env file if present).

    KNIGHTS_BOARD_SIZE  board size used when none is given on the command line
    KNIGHTS_DEBUG       print per-leaper traces and timing (1/true/yes)
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Inclusive range accepted by reports.run()
MIN_BOARD_SIZE = 5
MAX_BOARD_SIZE = 25

# Raw string; knights.py converts it when it is actually used
BOARD_SIZE = os.getenv('KNIGHTS_BOARD_SIZE', '7')
DEBUG = os.getenv('KNIGHTS_DEBUG', '').strip().lower() in ('1', 'true', 'yes')
