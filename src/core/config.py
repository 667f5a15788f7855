"""Process-wide settings. Values that may differ per deployment are read from the environment."""

import os

LOG_LEVEL = os.environ.get("QUORIDOR_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(levelname)s][%(filename)s:%(lineno)s][%(asctime)s] %(message)s"
DATE_FORMAT = "%Y:%m:%d, %H:%M"

# Standard Quoridor is played by two or four players
MIN_PLAYERS = 2
MAX_PLAYERS = 4
