# obpslg/utils.py

import logging
import sys

NARRATION_LOGGER = 'obpslg.narration'


# Keep level at WARNING by default to reduce console noise
# main.py can adjust if needed via --debug or --show-game-logs
def setup_logging(level=logging.WARNING, show_game_logs=False):
    """Configures basic logging to stderr."""
    logging.basicConfig(level=level,
                        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
                        stream=sys.stderr)
    # Play-by-play goes through its own logger so it can be switched on by itself
    if show_game_logs:
        logging.getLogger(NARRATION_LOGGER).setLevel(logging.INFO)
    elif level > logging.DEBUG:
        logging.getLogger(NARRATION_LOGGER).setLevel(logging.WARNING)
